import pytest

from human_name_parser.buffer import normalize_text
from human_name_parser.errors import ArgumentError, EncodingError, FormatError
from human_name_parser.parser import FIELDS, HumanName, NameParser, ParsedName, ParserConfig, parse_name


def test_parse_first_middle_last():
    name = HumanName("John Q. Smith")
    assert name.first == "John"
    assert name.middle == "Q."
    assert name.last == "Smith"
    assert f"{name.last}, {name.first}" == "Smith, John"


def test_parse_last_comma_first():
    name = HumanName("Smith, John")
    assert name.first == "John"
    assert name.last == "Smith"
    assert name.middle == ""


def test_parse_title_and_middle_initial():
    name = HumanName("Dr. Jane A. Doe")
    assert name.title == "Dr"
    assert name.leading_initial == ""
    assert name.first == "Jane"
    assert name.middle == "A."
    assert name.last == "Doe"


def test_parse_suffix_with_lone_surname():
    name = HumanName("Smith Jr.")
    assert name.suffix == "Jr"
    assert name.last == "Smith"
    assert name.first == ""


@pytest.mark.parametrize("raw", ["Mrs Bloggs", "Bloggs, Mrs"])
def test_parse_title_with_lone_surname(raw):
    name = HumanName(raw)
    assert name.title == "Mrs"
    assert name.last == "Bloggs"
    assert name.first == ""


def test_lone_word_is_a_first_name():
    name = HumanName("Smith")
    assert name.first == "Smith"
    assert name.last == ""


def test_multiple_commas_are_rejected():
    with pytest.raises(FormatError):
        HumanName("Smith, John, Jr.")


def test_full_name_with_every_component():
    name = HumanName("Dr. John Q. Smith Jr.")
    assert name.to_array("int") == ["", "Dr", "John", "", "Q.", "Smith", "Jr"]


def test_nickname_and_surname_prefix():
    name = HumanName("van der Berg, Anna 'Annie'")
    assert name.first == "Anna"
    assert name.nicknames == "Annie"
    assert name.last == "van der Berg"
    assert name.middle == ""


@pytest.mark.parametrize(
    ("raw", "nickname"),
    [
        ("John 'Jack' Kennedy", "Jack"),
        ('Robert "Bob" Smith', "Bob"),
        ("William (Bill) Gates", "Bill"),
        ("Margaret (\"Peggy\") Smith", "Peggy"),
    ],
)
def test_nickname_variants(raw, nickname):
    name = HumanName(raw)
    assert name.nicknames == nickname
    assert name.middle == ""
    assert name.last.endswith(raw.split()[-1])


def test_nickname_at_start_is_left_alone():
    name = HumanName("'Jack' Kennedy")
    assert name.nicknames == ""
    assert name.first == "'Jack'"
    assert name.last == "Kennedy"


@pytest.mark.parametrize(
    ("raw", "last"),
    [
        ("Ludwig van Beethoven", "van Beethoven"),
        ("Anna de la Cruz", "de la Cruz"),
        ("Juan García y Márquez", "García y Márquez"),
        ("Mary O'Brien", "O'Brien"),
    ],
)
def test_compound_last_names(raw, last):
    name = HumanName(raw)
    assert name.last == last
    assert name.first == raw.split()[0]


@pytest.mark.parametrize(
    ("raw", "title"),
    [
        ("Doctor Who Smith", "Dr"),
        ("prof. Albert Einstein", "Prof"),
        ("Mister Ed Horse", "Mr"),
        ("(Sir) Elton John", "Sir"),
        ("DOCTOR Jane Doe", "Doctor"),
        ("MISTER Ed Horse", "Mister"),
        ("dr. Jane Doe", "Dr"),
    ],
)
def test_titles_are_canonicalized(raw, title):
    assert HumanName(raw).title == title


def test_title_needs_a_whole_word():
    name = HumanName("Drew Barrymore")
    assert name.title == ""
    assert name.first == "Drew"
    assert name.last == "Barrymore"


def test_suffix_needs_a_whole_word():
    name = HumanName("Anna Ramii")
    assert name.suffix == ""
    assert name.last == "Ramii"


def test_roman_numeral_suffix_and_title():
    name = HumanName("Mr. John Smith III")
    assert name.title == "Mr"
    assert name.suffix == "III"
    assert name.last == "Smith"
    assert name.first == "John"


@pytest.mark.parametrize(
    ("raw", "initial"),
    [("J. Edgar Hoover", "J."), ("J Edgar Hoover", "J"), ("É. Zoë Ångström", "É.")],
)
def test_leading_initial(raw, initial):
    name = HumanName(raw)
    assert name.leading_initial == initial
    assert name.first == raw.split()[1]
    assert name.last == raw.split()[2]


def test_leading_initial_needs_a_following_word():
    name = HumanName("A. B. Smith")
    assert name.leading_initial == ""
    assert name.first == "A."
    assert name.middle == "B."


def test_unicode_names():
    name = HumanName("Björn Ångström")
    assert name.first == "Björn"
    assert name.last == "Ångström"


def test_empty_name():
    name = HumanName("   ")
    assert name.parsed.is_empty()
    assert str(name) == ""


@pytest.mark.parametrize(
    "raw",
    [
        "John Q. Smith",
        "Smith, John",
        "Dr. Jane A. Doe",
        "Smith Jr.",
        "van der Berg, Anna 'Annie'",
        "  J.  Edgar   Hoover ",
        "Mr. John Smith III",
        "Juan García y Márquez",
    ],
)
def test_components_come_from_the_input(raw):
    parsed = parse_name(raw)
    source = normalize_text(raw)
    for part in parsed.as_list():
        assert part == part.strip()
        assert part in source
    assert len(parsed.full_name().split()) <= len(source.replace("'", " ").split())


def test_to_array_modes():
    name = HumanName("Dr. Jane A. Doe")
    assoc = name.to_array("assoc")
    assert list(assoc) == list(FIELDS)
    assert assoc["title"] == "Dr"
    assert name.to_array("int") == list(assoc.values())
    assert name.to_array() == assoc


def test_to_array_rejects_unknown_mode():
    name = HumanName("Jane Doe")
    with pytest.raises(ArgumentError):
        name.to_array("num")
    assert name.last == "Doe"


def test_field_order():
    assert FIELDS == ("leading_initial", "title", "first", "nicknames", "middle", "last", "suffix")


def test_full_name_skips_empty_parts():
    parsed = ParsedName(title="Dr", first="Jane", last="Doe")
    assert parsed.full_name() == "Dr Jane Doe"


def test_malformed_input_is_rejected():
    with pytest.raises(EncodingError):
        HumanName(b"\xffSmith")


def test_custom_titles():
    parser = NameParser(ParserConfig(titles={"Rev": "Rev", "Reverend": "Rev"}))
    parsed = parser.parse("Reverend Martin Luther King Jr.")
    assert parsed.title == "Rev"
    assert parsed.first == "Martin"
    assert parsed.middle == "Luther"
    assert parsed.last == "King"
    assert parsed.suffix == "Jr"


def test_fix_text_repairs_mojibake():
    parsed = parse_name("JosÃ© Smith", ParserConfig(fix_text=True))
    assert parsed.first == "José"
    assert parsed.last == "Smith"


def test_parser_is_reusable():
    parser = NameParser()
    assert parser.parse("John Smith").last == "Smith"
    assert parser.parse("Jane Doe").last == "Doe"


def test_title_outside_the_table_is_capitalized():
    parsed = NameParser(ParserConfig(titles={"Rev": "Rev"})).parse("rev John Smith")
    assert parsed.title == "Rev"
    assert parsed.first == "John"
    assert parsed.last == "Smith"
