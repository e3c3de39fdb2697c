# core/fields.py
from rest_framework import serializers

SCALAR_TYPES = (str, int, float, bool)


class StatsField(serializers.Field):
    """
    Statistiques libres : {"clé": valeur scalaire}.
    Les valeurs imbriquées (listes, objets) sont refusées.
    """
    default_error_messages = {
        "not_a_dict": "Expected an object of stats but got {input_type}.",
        "invalid_value": "Stat '{name}' must be a number, string, boolean or null.",
    }

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("default", dict)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, dict):
            self.fail("not_a_dict", input_type=type(data).__name__)
        for key, value in data.items():
            if value is not None and not isinstance(value, SCALAR_TYPES):
                self.fail("invalid_value", name=key)
        return {str(key): value for key, value in data.items()}

    def to_representation(self, value):
        return dict(value or {})
