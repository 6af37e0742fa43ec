"""Tests for the construction registry and its builder."""
import pytest
from enum import Enum
from factories import ConstructionRegistry, RegistryBuilder, parse_discriminant
from factories.registry import normalize_name
from factories.currency import Country
from utils.exceptions import UnsupportedDiscriminant, InvalidPayload, RegistrationError


class Shape(Enum):
    CIRCLE = 'circle'
    SQUARE = 'square'
    HEXAGON = 'hexagon'


class Colour(Enum):
    RED = 'red'


class Circle:
    def name(self):
        return "circle"


class Square:
    def name(self):
        return "square"


class Sized:
    def __init__(self, text):
        if not text.isdigit():
            raise InvalidPayload(text)
        self.size = int(text)


@pytest.fixture
def shapes():
    return ConstructionRegistry(
        Shape,
        {Shape.CIRCLE: Circle, Shape.SQUARE: Square},
        name='shapes'
    )


class TestResolve:
    """Tests for resolution."""

    def test_resolve_mapped(self, shapes):
        """Test resolving a mapped discriminant constructs its product."""
        assert isinstance(shapes.resolve(Shape.CIRCLE), Circle)
        assert shapes.resolve(Shape.SQUARE).name() == "square"

    def test_resolve_unmapped_returns_none(self, shapes):
        """Test unmapped discriminants give None rather than raising."""
        assert shapes.resolve(Shape.HEXAGON) is None

    def test_resolve_foreign_value_returns_none(self, shapes):
        """Test values outside the enum are unsupported."""
        assert shapes.resolve(Colour.RED) is None
        assert shapes.resolve('circle') is None
        assert shapes.resolve(None) is None

    def test_resolve_returns_fresh_instances(self, shapes):
        """Test every resolution constructs a new product."""
        first = shapes.resolve(Shape.CIRCLE)
        second = shapes.resolve(Shape.CIRCLE)
        assert first is not second

    def test_require_raises_for_unmapped(self, shapes):
        """Test require escalates a missing product."""
        with pytest.raises(UnsupportedDiscriminant) as exc_info:
            shapes.require(Shape.HEXAGON)

        error = exc_info.value
        assert error.discriminant is Shape.HEXAGON
        assert error.details['registry'] == 'shapes'
        assert error.details['available'] == ['CIRCLE', 'SQUARE']
        assert error.to_dict()['error_type'] == 'UnsupportedDiscriminant'

    def test_resolve_from_string(self):
        """Test string payloads are passed to the constructor."""
        registry = ConstructionRegistry(Shape, {Shape.SQUARE: Sized})
        assert registry.resolve_from_string(Shape.SQUARE, "4").size == 4
        assert registry.resolve_from_string(Shape.CIRCLE, "4") is None

    def test_resolve_from_string_propagates_invalid_payload(self):
        """Test constructor parse errors reach the caller."""
        registry = ConstructionRegistry(Shape, {Shape.SQUARE: Sized})
        with pytest.raises(InvalidPayload):
            registry.resolve_from_string(Shape.SQUARE, "four")


class TestIntrospection:
    """Tests for registry introspection."""

    def test_supports_and_contains(self, shapes):
        """Test membership checks."""
        assert shapes.supports(Shape.CIRCLE)
        assert Shape.SQUARE in shapes
        assert Shape.HEXAGON not in shapes

    def test_discriminants_in_declaration_order(self):
        """Test discriminants follow enum order, not insertion order."""
        registry = ConstructionRegistry(Shape, {Shape.SQUARE: Square, Shape.CIRCLE: Circle})
        assert registry.discriminants() == [Shape.CIRCLE, Shape.SQUARE]
        assert len(registry) == 2

    def test_constructor_for(self, shapes):
        """Test the registered constructor is returned as-is."""
        assert shapes.constructor_for(Shape.CIRCLE) is Circle
        assert shapes.constructor_for(Shape.HEXAGON) is None

    def test_entries_are_read_only(self, shapes):
        """Test the mapping cannot be changed after creation."""
        with pytest.raises(TypeError):
            shapes._entries[Shape.HEXAGON] = Circle

    def test_source_mapping_is_copied(self):
        """Test later changes to the source dict do not leak in."""
        entries = {Shape.CIRCLE: Circle}
        registry = ConstructionRegistry(Shape, entries)
        entries[Shape.SQUARE] = Square
        assert registry.resolve(Shape.SQUARE) is None


class TestValidation:
    """Tests for registry creation checks."""

    def test_total_registry_requires_every_member(self):
        """Test total registries reject missing members."""
        with pytest.raises(RegistrationError) as exc_info:
            ConstructionRegistry(Shape, {Shape.CIRCLE: Circle}, total=True)
        assert exc_info.value.details['missing'] == ['SQUARE', 'HEXAGON']

    def test_foreign_keys_rejected(self):
        """Test entries keyed by another enum are rejected."""
        with pytest.raises(RegistrationError):
            ConstructionRegistry(Shape, {Colour.RED: Circle})


class TestBuilder:
    """Tests for RegistryBuilder."""

    def test_build(self):
        """Test building a registry fluently."""
        registry = (
            RegistryBuilder(Shape, name='built')
            .register(Shape.CIRCLE, Circle)
            .register(Shape.SQUARE, Square)
            .build()
        )
        assert registry.name == 'built'
        assert isinstance(registry.resolve(Shape.CIRCLE), Circle)

    def test_duplicate_registration_rejected(self):
        """Test registering a discriminant twice fails."""
        builder = RegistryBuilder(Shape).register(Shape.CIRCLE, Circle)
        with pytest.raises(RegistrationError):
            builder.register(Shape.CIRCLE, Square)

    def test_foreign_discriminant_rejected(self):
        """Test registering a member of another enum fails."""
        with pytest.raises(RegistrationError):
            RegistryBuilder(Shape).register(Colour.RED, Circle)

    def test_build_total(self):
        """Test total builds check coverage."""
        builder = RegistryBuilder(Shape).register(Shape.CIRCLE, Circle)
        with pytest.raises(RegistrationError):
            builder.build(total=True)

    def test_reset(self):
        """Test reset drops collected entries."""
        builder = RegistryBuilder(Shape).register(Shape.CIRCLE, Circle)
        registry = builder.reset().build()
        assert len(registry) == 0


class TestParseDiscriminant:
    """Tests for parse_discriminant."""

    def test_member_passes_through(self):
        assert parse_discriminant(Shape, Shape.SQUARE) is Shape.SQUARE

    def test_name_is_case_insensitive(self):
        """Test names match regardless of case and separators."""
        assert parse_discriminant(Shape, 'circle') is Shape.CIRCLE
        assert parse_discriminant(Shape, ' Hexagon ') is Shape.HEXAGON

    def test_dashes_match_underscores(self):
        assert normalize_name(' United-States ') == 'united_states'
        assert parse_discriminant(Country, 'united-states') is Country.UNITED_STATES

    def test_unknown_name_raises(self):
        """Test unknown names raise UnsupportedDiscriminant."""
        with pytest.raises(UnsupportedDiscriminant) as exc_info:
            parse_discriminant(Shape, 'triangle')
        assert exc_info.value.details['allowed'] == ['CIRCLE', 'SQUARE', 'HEXAGON']

    def test_non_string_raises(self):
        with pytest.raises(UnsupportedDiscriminant):
            parse_discriminant(Shape, 3)
