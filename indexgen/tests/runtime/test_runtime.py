"""Tests for the runtime support package."""

from indexgen.runtime import OutOfRangeError, indexed


def describe_out_of_range_error():
    def carries_the_name(expect):
        error = OutOfRangeError("Email")
        expect(error.name) == "Email"
        expect(str(error)) == "Email"

    def formats_non_string_keys(expect):
        error = OutOfRangeError(0)
        expect(error.name) == 0
        expect(str(error)) == "0"

    def is_a_lookup_error(expect):
        expect(isinstance(OutOfRangeError("x"), LookupError)) == True


def describe_indexed():
    def returns_class_unchanged(expect):
        class Person:
            pass

        expect(indexed(Person) is Person) == True
