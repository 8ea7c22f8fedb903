import pytest

from curpgen.curp import (
    PersonalData,
    filter_inconvenient_word,
    first_internal_consonant,
)

TEST_CURP = "GOAR881103HDFNRL00"


def test_valid_curp():
    data = PersonalData(
        name="RAUL EDUARDO",
        first_surname="GONZALEZ",
        second_surname="ARGOTE",
        sex="H",
        birth_date="1988-11-03",
        state="DF",
    )
    assert data.generate_curp() == TEST_CURP


def test_from_bytes_matches_direct_construction():
    data = PersonalData.from_bytes(
        b"RAUL EDUARDO", b"GONZALEZ", b"ARGOTE", ord("H"), b"1988-11-03", b"DF"
    )
    assert data.sex == "H"
    assert data.generate_curp() == TEST_CURP


def test_from_bytes_accepts_single_byte_sex():
    data = PersonalData.from_bytes(b"A", b"B", b"C", b"M", b"2000-01-01", b"NL")
    assert data.sex == "M"


def test_from_bytes_rejects_invalid_utf8():
    with pytest.raises(UnicodeDecodeError):
        PersonalData.from_bytes(b"\xff\xfe", b"B", b"C", b"H", b"2000-01-01", b"NL")


def test_from_bytes_rejects_multi_byte_sex():
    with pytest.raises(ValueError):
        PersonalData.from_bytes(b"A", b"B", b"C", b"HM", b"2000-01-01", b"NL")


def test_sex_must_be_one_character():
    with pytest.raises(ValueError):
        PersonalData("A", "B", "C", "HM", "2000-01-01", "NL")


def test_inconvenient_word_in_generated_curp_is_filtered():
    data = PersonalData("ELENA", "PEREZ", "NAVA", "H", "1966-07-20", "df")
    assert data.generate_curp() == "PXNE660720HDFRVL00"


def test_born_after_2000_uses_letter_marker():
    data = PersonalData("MARIA", "LOPEZ", "DIAZ", "M", "2005-01-15", "NL")
    assert data.generate_curp() == "LODM050115MNLPZRA0"


def test_missing_data_uses_placeholders():
    data = PersonalData("", "", "", "M", "", "")
    assert data.generate_curp() == "XXXX000000MXXX00"


def test_non_numeric_year_defaults_to_twentieth_century():
    data = PersonalData("ANA", "RUIZ", "SOTO", "M", "abcd-01-02", "JC")
    assert data.generate_curp() == "RUSACD0102MJCZTN00"


def test_lowercase_input_is_uppercased():
    data = PersonalData("raul eduardo", "gonzalez", "argote", "h", "1988-11-03", "df")
    assert data.generate_curp() == TEST_CURP


def test_short_year_raises():
    data = PersonalData("ANA", "RUIZ", "SOTO", "M", "88-11-03", "JC")
    with pytest.raises(ValueError):
        data.generate_curp()


@pytest.mark.parametrize(
    "curp, expected",
    [
        ("PENE660720HDFNTN00", "PXNE660720HDFNTN00"),
        ("CACA", "CXCA"),
        ("GOAR881103HDFNRL00", "GOAR881103HDFNRL00"),
        ("PE", "PE"),
        ("", ""),
    ],
)
def test_filter_inconvenient_word(curp, expected):
    assert filter_inconvenient_word(curp) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("GONZALEZ", "N"),
        ("ARGOTE", "R"),
        ("A", "X"),
        ("AEIOU", "X"),
        ("", "X"),
        ("O'BRIEN", "B"),
        ("RAUL EDUARDO", "L"),
    ],
)
def test_first_internal_consonant(text, expected):
    assert first_internal_consonant(text) == expected