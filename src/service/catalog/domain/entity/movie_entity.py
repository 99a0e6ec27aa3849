import attrs


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Movie {attribute.name} cannot be empty')


@attrs.define(frozen=True)
class Movie:
    id: int
    title: str = attrs.field(validator=_validate_non_empty_string)
    is_blockbuster: bool = False
