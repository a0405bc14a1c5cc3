"""cssforge - build CSS selectors from typed parts with ordering checks."""

__version__ = "0.1.0"

from cssforge.builder import (  # noqa: E402
    Selector,
    attr,
    class_,
    combine,
    element,
    id_,
    pseudo_class,
    pseudo_element,
    stringify,
)
from cssforge.config import BuilderConfig  # noqa: E402
from cssforge.errors import CompositionError  # noqa: E402
from cssforge.model import Rectangle, Token, TokenKind, make_rectangle  # noqa: E402
from cssforge.serialization import decode, encode  # noqa: E402

__all__ = [
    "__version__",
    # builder
    "Selector",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
    # config / errors
    "BuilderConfig",
    "CompositionError",
    # model
    "Token",
    "TokenKind",
    "Rectangle",
    "make_rectangle",
    # serialization
    "encode",
    "decode",
]
