from cssforge.builder.facade import (
    attr,
    class_,
    combine,
    element,
    id_,
    pseudo_class,
    pseudo_element,
    stringify,
)
from cssforge.builder.selector import Selector

__all__ = [
    "Selector",
    "element",
    "id_",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "stringify",
]
