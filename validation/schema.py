"""
Schema validation for configuration dictionaries.
"""
from copy import deepcopy
from typing import Any, Dict
from utils.logging_config import get_logger
from utils.exceptions import ValidationError
from factories.registry import normalize_name
from factories.widgets import Style
from factories.numerics import NumberType
from factories.currency import Country
from factories.fruit import FruitKind
from factories.banks import BankType

logger = get_logger(__name__)


class Schema:
    """Schema for validating dictionaries."""

    def __init__(self, schema: Dict[str, Any], strict: bool = False):
        """
        Initialize schema.

        Args:
            schema: Dictionary defining expected structure
            strict: If True, reject extra keys not in schema
        """
        self.schema = schema
        self.strict = strict

    def validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate data against schema."""
        if not isinstance(data, dict):
            raise ValidationError(
                f"Expected dict, got {type(data)}",
                details={'actual_type': str(type(data))}
            )

        validated = {}
        errors = []

        for key, spec in self.schema.items():
            if key not in data:
                if isinstance(spec, dict) and not spec.get('required', True):
                    # Optional field, use default if provided
                    if 'default' in spec:
                        default = deepcopy(spec['default'])
                        if 'schema' in spec:
                            default = spec['schema'].validate(dict(default))
                        validated[key] = default
                    continue
                errors.append(f"Missing required field: {key}")
                continue

            try:
                validated[key] = self._validate_field(key, data[key], spec)
            except ValidationError as e:
                errors.append(f"Field '{key}': {e.message}")

        if self.strict:
            extra_keys = set(data.keys()) - set(self.schema.keys())
            if extra_keys:
                errors.append(f"Unexpected fields: {sorted(extra_keys)}")
        else:
            for key in data:
                if key not in validated:
                    validated[key] = data[key]

        if errors:
            raise ValidationError(
                "Schema validation failed",
                details={'errors': errors}
            )

        return validated

    def _validate_field(self, key: str, value: Any, spec: Any) -> Any:
        """Validate a single field."""
        if isinstance(spec, Schema):
            return spec.validate(value)

        if isinstance(spec, type):
            if not isinstance(value, spec):
                raise ValidationError(
                    f"Expected {spec.__name__}, got {type(value).__name__}",
                    details={'expected': spec.__name__, 'actual': type(value).__name__}
                )
            return value

        if isinstance(spec, dict):
            expected_type = spec.get('type')
            if expected_type and not isinstance(value, expected_type):
                raise ValidationError(
                    f"Expected {expected_type}, got {type(value).__name__}",
                    details={'expected': str(expected_type), 'actual': type(value).__name__}
                )

            if 'schema' in spec:
                value = spec['schema'].validate(value)

            if 'choices' in spec:
                choices = spec['choices']
                normalized = normalize_name(value) if isinstance(value, str) else value
                if normalized not in choices:
                    raise ValidationError(
                        f"Must be one of {choices}, got {value}",
                        details={'allowed': choices, 'actual': value}
                    )

            if 'max_items' in spec and len(value) > spec['max_items']:
                raise ValidationError(
                    f"At most {spec['max_items']} items allowed, got {len(value)}",
                    details={'max_items': spec['max_items'], 'actual': len(value)}
                )

            if 'item_type' in spec:
                bad = [item for item in value if not isinstance(item, spec['item_type'])]
                if bad:
                    raise ValidationError(
                        f"Items must be {spec['item_type'].__name__}, got {bad}",
                        details={'invalid_items': bad}
                    )

            return value

        return value


def _choices(enum_type) -> list:
    return [member.name.lower() for member in enum_type]


class PlaygroundSchema(Schema):
    """Schema for the playground configuration."""

    def __init__(self):
        logging_schema = Schema({
            'log_level': {
                'type': str,
                'required': False,
                'default': 'WARNING',
                'choices': ['debug', 'info', 'warning', 'error', 'critical']
            },
            'log_dir': {'type': str, 'required': False, 'default': 'logs'},
            'enable_file': {'type': bool, 'required': False, 'default': False},
            'enable_structured': {'type': bool, 'required': False, 'default': False},
        })

        playground_schema = Schema({
            'style': {
                'type': str,
                'required': False,
                'default': 'mac',
                'choices': _choices(Style)
            },
            'country': {
                'type': str,
                'required': False,
                'default': 'united_states',
                'choices': _choices(Country)
            },
            'numbers': {
                'type': list,
                'required': False,
                'default': ['1', '2'],
                'max_items': len(NumberType),
                'item_type': str
            },
            'fruit': {
                'type': str,
                'required': False,
                'default': 'apple',
                'choices': _choices(FruitKind)
            },
            'bank': {
                'type': str,
                'required': False,
                'default': 'cmbc',
                'choices': _choices(BankType)
            },
        })

        schema = {
            'logging': {'type': dict, 'required': False, 'default': {}, 'schema': logging_schema},
            'playground': {'type': dict, 'required': False, 'default': {}, 'schema': playground_schema},
        }
        super().__init__(schema, strict=False)
