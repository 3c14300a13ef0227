from tagbox.builtin import extensions
from tagbox.builtin import serializers
from tagbox.builtin.extensions import *  # noqa: F403
from tagbox.builtin.serializers import *  # noqa: F403

__all__ = []
__all__.extend(extensions.__all__)
__all__.extend(serializers.__all__)
