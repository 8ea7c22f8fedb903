# curpgen

A small library with no dependencies. It builds a CURP (Clave Única de
Registro de Población) from a person's name, surnames, sex, date of birth
and state code. It also applies the catalogue of inconvenient words: when
the first four letters of the key spell one of them, the second letter is
replaced with `X`.

## Installation

```
pip install curpgen
```

## Usage

```python
from curpgen.curp import PersonalData

person = PersonalData(
    name="RAUL EDUARDO",
    first_surname="GONZALEZ",
    second_surname="ARGOTE",
    sex="H",
    birth_date="1988-11-03",
    state="DF",
)
print(person.generate_curp())  # GOAR881103HDFNRL00
```

`PersonalData` is a frozen dataclass with these fields:

- `name` is the given name or names.
- `first_surname` and `second_surname` are the two surnames.
- `sex` is a single character, `"H"` or `"M"`. Any other length raises
  `ValueError`.
- `birth_date` is written `YYYY-MM-DD`.
- `state` is the state code. It is upper-cased into the key.

### How the key is built

`generate_curp()` joins these parts and upper-cases the result:

1. The first letter of the first surname.
2. The first vowel after that letter.
3. The first letter of the second surname.
4. The first letter of the name.
5. The last two digits of the year, then the month and the day, exactly as
   written in `birth_date`.
6. The sex.
7. The state code.
8. The first internal consonant of the first surname, of the second
   surname and of the name, in that order.
9. `0` for a year before 2000 and `A` otherwise.
10. A final `0`.

Any part that cannot be found, such as an empty field or a missing vowel or
consonant, becomes `X`.

If `birth_date` does not split into exactly three parts on `-`, the date
becomes `000000`. A year that is not an integer counts as 1900. When the
date does have three parts, a year shorter than four bytes raises
`ValueError`.

### From raw bytes

If your fields are UTF-8 byte strings, build the record with
`PersonalData.from_bytes(name, first_surname, second_surname, sex,
birth_date, state)`. `sex` may be one byte given as an `int`, a one-byte
`bytes` value, or a `str`. Text fields that are not valid UTF-8 raise
`UnicodeDecodeError`.

### Helpers

- `filter_inconvenient_word(curp)` checks the first four letters of the key
  against the catalogue in `INCONVENIENT_WORDS`. On a match it returns the
  key with the second letter replaced by `X`, so `"PENE660720HDFNTN00"`
  becomes `"PXNE660720HDFNTN00"`. Otherwise it returns the key unchanged.
- `first_internal_consonant(text)` returns the first alphabetic non-vowel
  after the first character of `text`, or `"X"` if there is none.

## What it does not do

- It does not validate its input. It does not check dates, state codes or
  the value of `sex`.
- It does not compute the check digit. The last character is always `0`.
  The character before it only marks the century of birth and does not
  tell people with the same details apart.
- It does not handle compound names, particles such as "DE" or "DEL", or
  accented letters and `Ñ`. Fields are used as given.
- It has no command-line interface. It is a library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```