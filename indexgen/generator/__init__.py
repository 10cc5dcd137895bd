"""indexgen accessor generator."""

from .extractor import DeclarationView as DeclarationView
from .extractor import extract as extract
from .parser import ValidationError as ValidationError
from .parser import parse as parse
from .pipeline import GeneratedUnit as GeneratedUnit
from .pipeline import candidates as candidates
from .pipeline import generate as generate
from .pipeline import generate_all as generate_all
from .pysource import parse_python as parse_python
from .synthesizer import LANGUAGES as LANGUAGES
from .synthesizer import synthesize as synthesize
from .types import *
