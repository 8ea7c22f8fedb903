"""Generation of the Mexican CURP (Clave Única de Registro de Población)."""

from __future__ import annotations

import re
from dataclasses import dataclass

_VOWELS = frozenset("AEIOUaeiou")
_PLACEHOLDER = "X"
_DEFAULT_YEAR = 1900
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")

# "Catálogo de Palabras Inconvenientes" (Anexo 2 of the official instructions).
INCONVENIENT_WORDS = frozenset(
    {
        "BACA", "BAKA", "BUEI", "BUEY", "CACA", "CACO", "CAGA", "CAGO", "CAKA",
        "CAKO", "COGE", "COGI", "COJA", "COJE", "COJI", "COJO", "COLA", "CULO",
        "FALO", "FETO", "GETA", "GUEI", "GUEY", "JETA", "JOTO", "KACA", "KACO",
        "KAGA", "KAGO", "KAKA", "KAKO", "KOGE", "KOGI", "KOJA", "KOJE", "KOJI",
        "KOJO", "KOLA", "KULO", "LILO", "LOCA", "LOCO", "LOKA", "LOKO", "MALA",
        "MALO", "MAME", "MAMO", "MEAR", "MEAS", "MEON", "MIAR", "MION", "MOCO",
        "MOKO", "MULA", "MULO", "NACA", "NACO", "PEDA", "PEDO", "PENE", "PIPI",
        "PITO", "POPO", "PUTA", "PUTO", "QULO", "RATA", "ROBA", "ROBE", "ROBO",
        "RUIN", "SENO", "TETA", "VACA", "VAGA", "VAGO", "VAKA", "VUEI", "VUEY",
        "WUEI", "WUEY",
    }
)


def _first_char(text: str) -> str:
    return text[0] if text else _PLACEHOLDER


def _first_internal_vowel(text: str) -> str:
    return next((c for c in text[1:] if c in _VOWELS), _PLACEHOLDER)


def first_internal_consonant(text: str) -> str:
    """Return the first consonant after the first character, or 'X'."""
    return next(
        (c for c in text[1:] if c not in _VOWELS and c.isalpha()),
        _PLACEHOLDER,
    )


def filter_inconvenient_word(curp: str) -> str:
    """Replace the second letter with 'X' when the first four form an offensive word."""
    if curp[:4] in INCONVENIENT_WORDS:
        return curp[0] + _PLACEHOLDER + curp[2:]
    return curp


def _two_digit_year(year: str) -> str:
    """Return bytes 2..4 of the year text, failing as a byte slice would."""
    raw = year.encode("utf-8")
    if len(raw) < 4:
        raise ValueError(f"birth year {year!r} is too short")
    try:
        return raw[2:4].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(
            f"birth year {year!r} cannot be cut at bytes 2..4"
        ) from exc


def _parse_year(text: str) -> int:
    if _SIGNED_INT.fullmatch(text):
        value = int(text)
        if _INT32_MIN <= value <= _INT32_MAX:
            return value
    return _DEFAULT_YEAR


def _decode_sex(sex: int | bytes | str) -> str:
    if isinstance(sex, int):
        return chr(sex & 0xFF)
    if isinstance(sex, bytes):
        if len(sex) != 1:
            raise ValueError("sex must be a single byte")
        return chr(sex[0])
    return sex


@dataclass(frozen=True)
class PersonalData:
    """The personal details a CURP is built from."""

    name: str
    first_surname: str
    second_surname: str
    sex: str  # 'H' or 'M'
    birth_date: str  # "YYYY-MM-DD"
    state: str

    def __post_init__(self) -> None:
        if len(self.sex) != 1:
            raise ValueError("sex must be a single character")

    @classmethod
    def from_bytes(
        cls,
        name: bytes,
        first_surname: bytes,
        second_surname: bytes,
        sex: int | bytes | str,
        birth_date: bytes,
        state: bytes,
    ) -> PersonalData:
        """Build from raw UTF-8 byte strings; raises UnicodeDecodeError on bad input."""
        return cls(
            name=name.decode("utf-8"),
            first_surname=first_surname.decode("utf-8"),
            second_surname=second_surname.decode("utf-8"),
            sex=_decode_sex(sex),
            birth_date=birth_date.decode("utf-8"),
            state=state.decode("utf-8"),
        )

    def generate_curp(self) -> str:
        """Build the CURP for these details."""
        pieces = [
            _first_char(self.first_surname),
            _first_internal_vowel(self.first_surname),
            _first_char(self.second_surname),
            _first_char(self.name),
        ]

        parts = self.birth_date.split("-")
        if len(parts) == 3:
            year, month, day = parts
            pieces += [_two_digit_year(year), month, day]
        else:
            pieces.append("000000")

        pieces += [
            self.sex,
            self.state.upper(),
            first_internal_consonant(self.first_surname),
            first_internal_consonant(self.second_surname),
            first_internal_consonant(self.name),
            "0" if _parse_year(parts[0]) < 2000 else "A",
            "0",
        ]

        return filter_inconvenient_word("".join(pieces).upper())