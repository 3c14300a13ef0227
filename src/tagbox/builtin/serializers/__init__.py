from tagbox.builtin.serializers.json import ItemJsonOptions
from tagbox.builtin.serializers.json import item_json_serializer

__all__ = ("ItemJsonOptions", "item_json_serializer")
