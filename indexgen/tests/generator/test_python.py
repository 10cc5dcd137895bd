"""Tests for the Python accessor generator.

Generated mixins are compiled and exercised against the packaged runtime.
"""

from dataclasses import dataclass

import pytest

from indexgen.generator import extract, parse, parse_python, python, synthesize
from indexgen.generator.types import MemberDescriptor, TypeDescriptor
from indexgen.runtime import OutOfRangeError

NAME = MemberDescriptor(name="Name", type="str", readable=True, writable=True)
AGE = MemberDescriptor(name="Age", type="int", readable=True, writable=False)


def _type(*members, namespace=None, identifier="Person"):
    return TypeDescriptor(
        identifier=identifier,
        declaration_header=f"class {identifier}",
        namespace=namespace,
        members=tuple(members),
    )


def _mixin(type_descriptor):
    source = synthesize(type_descriptor, "python", runtime_import="indexgen.runtime")
    namespace: dict = {}
    exec(compile(source, python.filename(type_descriptor.identifier), "exec"), namespace)
    return namespace[python.class_name(type_descriptor.identifier)]


def _person(mixin):
    class Person(mixin):
        def __init__(self, name, age):
            self.Name = name
            self.Age = age

    return Person("Ada", 36)


def describe_generated_accessor():
    def gets_readable_members(expect):
        person = _person(_mixin(_type(NAME, AGE)))
        expect(person["Name"]) == "Ada"
        expect(person["Age"]) == 36

    def sets_writable_members(expect):
        person = _person(_mixin(_type(NAME, AGE)))
        person["Name"] = "Eve"
        expect(person.Name) == "Eve"
        expect(person["Name"]) == "Eve"

    def rejects_setting_read_only_members(expect):
        person = _person(_mixin(_type(NAME, AGE)))
        with pytest.raises(OutOfRangeError) as exc:
            person["Age"] = 5
        expect(exc.value.name) == "Age"
        expect(person.Age) == 36

    def rejects_unknown_keys(expect):
        person = _person(_mixin(_type(NAME, AGE)))
        with pytest.raises(OutOfRangeError) as exc:
            person["Email"]
        expect(exc.value.name) == "Email"
        with pytest.raises(OutOfRangeError) as exc:
            person["Email"] = "ada@example.com"
        expect(exc.value.name) == "Email"

    def reports_non_string_keys(expect):
        person = _person(_mixin(_type(NAME, AGE)))
        with pytest.raises(OutOfRangeError) as exc:
            person[0]
        expect(exc.value.name) == 0
        expect(str(exc.value)) == "0"

    def matches_case_sensitively(expect):
        person = _person(_mixin(_type(NAME, AGE)))
        with pytest.raises(OutOfRangeError):
            person["name"]
        with pytest.raises(OutOfRangeError):
            person["Nam"]

    def distinguishes_missing_keys_from_empty_values(expect):
        person = _person(_mixin(_type(NAME, AGE)))
        person["Name"] = ""
        expect(person["Name"]) == ""
        person.Age = 0
        expect(person["Age"]) == 0

    def rejects_every_key_for_empty_types(expect):
        mixin = _mixin(_type(identifier="Nothing"))

        class Nothing(mixin):
            pass

        nothing = Nothing()
        with pytest.raises(OutOfRangeError):
            nothing["Anything"]
        with pytest.raises(OutOfRangeError):
            nothing["Anything"] = 1

    def supports_write_only_members(expect):
        secret = MemberDescriptor(name="Secret", type="str", readable=False, writable=True)
        mixin = _mixin(_type(secret, identifier="Vault"))

        class Vault(mixin):
            pass

        vault = Vault()
        vault["Secret"] = "hunter2"
        expect(vault.Secret) == "hunter2"
        with pytest.raises(OutOfRangeError):
            vault["Secret"]

    def gives_same_results_in_any_dispatch_order(expect):
        forward = _person(_mixin(_type(NAME, AGE)))
        backward = _person(_mixin(_type(AGE, NAME)))
        for key in ("Name", "Age"):
            expect(forward[key]) == backward[key]
        forward["Name"] = backward["Name"] = "Eve"
        expect(forward["Name"]) == backward["Name"]

    def reads_through_properties(expect):
        mixin = _mixin(_type(MemberDescriptor("Upper", "str", True, False), identifier="Label"))

        class Label(mixin):
            @property
            def Upper(self):
                return "LABEL"

        expect(Label()["Upper"]) == "LABEL"


def describe_render():
    def orders_clauses_by_member(expect):
        forward = python.render(_type(NAME, AGE))
        backward = python.render(_type(AGE, NAME))
        expect(forward.index('case "Name"') < forward.index('case "Age"')) == True
        expect(backward.index('case "Age"') < backward.index('case "Name"')) == True
        expect(forward) != backward

    def imports_runtime(expect):
        expect("from indexgen_runtime import OutOfRangeError" in python.render(_type())) == True
        source = python.render(_type(), runtime_import="app.runtime")
        expect("from app.runtime import OutOfRangeError" in source) == True

    def imports_cast_only_when_setting(expect):
        expect("cast" in python.render(_type(AGE))) == False
        expect("self.Name = cast(\"str\", value)" in python.render(_type(NAME))) == True

    def quotes_type_text(expect):
        mode = MemberDescriptor(name="Mode", type='Literal["a", "b"]', readable=True, writable=True)
        source = python.render(_type(mode))
        expect('cast("Literal[\\"a\\", \\"b\\"]", value)' in source) == True

    def names_qualified_type_in_docstring(expect):
        source = python.render(_type(NAME, namespace="contacts.models"))
        expect('"""String-keyed member access for contacts.models.Person."""' in source) == True

    def is_idempotent(expect):
        expect(python.render(_type(NAME, AGE))) == python.render(_type(NAME, AGE))


def describe_end_to_end():
    def augments_frozen_dataclass(expect):
        declaration = parse_python(
            """
from dataclasses import dataclass

@indexed
@dataclass(frozen=True)
class Point:
    x: float
    y: float
"""
        )[0]
        mixin = _mixin(extract(declaration))

        @dataclass(frozen=True)
        class Point(mixin):
            x: float
            y: float

        point = Point(1.0, 2.0)
        expect(point["x"]) == 1.0
        expect(point["y"]) == 2.0
        with pytest.raises(OutOfRangeError):
            point["x"] = 3.0

    def augments_declared_record(expect):
        declaration = parse(
            """
            partial record Person {
                Name: str { get; set; }
                Age: int { get; init; }
            }
        """
        )[0]
        person = _person(_mixin(extract(declaration)))
        person["Name"] = "Eve"
        expect(person["Name"]) == "Eve"
        with pytest.raises(OutOfRangeError):
            person["Age"] = 5


def describe_filename():
    def names_generated_module(expect):
        expect(python.filename("Person")) == "person_indexer.py"
        expect(python.filename("HTTPHeader")) == "http_header_indexer.py"
        expect(python.class_name("Person")) == "PersonIndexer"


def describe_runtime():
    def returns_runtime_files(expect):
        files = python.runtime()
        expect(sorted(files)) == ["__init__.py", "errors.py", "markers.py"]
        expect("class OutOfRangeError" in files["errors.py"]) == True
