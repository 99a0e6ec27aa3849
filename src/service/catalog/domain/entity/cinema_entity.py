import re

import attrs

from src.service.shared_kernel.domain.enum.cinema_class import CinemaClass


_CINEMA_CODE = re.compile(r'^[A-Z0-9]{3}$')


def _validate_cinema_code(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not _CINEMA_CODE.match(value):
        raise ValueError(f'Cinema code must be exactly 3 characters (i.e, XYZ), got {value!r}')


@attrs.define(frozen=True)
class Cinema:
    id: int
    code: str = attrs.field(validator=_validate_cinema_code)
    class_type: CinemaClass = attrs.field(converter=CinemaClass)
