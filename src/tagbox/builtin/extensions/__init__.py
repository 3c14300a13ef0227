from tagbox.builtin.extensions.binary import BinaryExtension
from tagbox.builtin.extensions.binary import binary_extension
from tagbox.builtin.extensions.boolean import BooleanExtension
from tagbox.builtin.extensions.boolean import boolean_extension
from tagbox.builtin.extensions.sets import SetExtension
from tagbox.builtin.extensions.sets import set_extension

__all__ = (
    "BinaryExtension",
    "BooleanExtension",
    "SetExtension",
    "binary_extension",
    "boolean_extension",
    "set_extension",
)
