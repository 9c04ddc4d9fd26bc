import pytest

from ledger_export.extract import extract_pattern, trim


def test_removes_match_and_closes_gap_with_one_space():
    text, match = extract_pattern("Lunch   {19%}  with team", r"\{.*?\}")

    assert text == "Lunch with team"
    assert match == "{19%}"


def test_match_at_edges_is_trimmed():
    assert extract_pattern("{19%} Lunch", r"\{.*?\}") == ("Lunch", "{19%}")
    assert extract_pattern("Lunch {19%}", r"\{.*?\}") == ("Lunch", "{19%}")


def test_no_match_returns_text_unaltered():
    assert extract_pattern("  plain  text ", r"\{.*?\}") == ("  plain  text ", None)
    assert extract_pattern("  plain  text ", r"\{.*?\}", multiple=True) == (
        "  plain  text ",
        [],
    )


def test_singular_mode_returns_last_match():
    text, match = extract_pattern("a [one] b [two] c", r"\[.*?\]")

    assert text == "a b c"
    assert match == "[two]"


def test_multiple_mode_returns_all_matches_in_order():
    text, matches = extract_pattern("#a x #b y #c", r"#\S+", multiple=True)

    assert text == "x y"
    assert matches == ["#a", "#b", "#c"]


def test_repeated_match_is_removed_once_per_occurrence():
    text, matches = extract_pattern("#a x #a", r"#\S+", multiple=True)

    assert text == "x"
    assert matches == ["#a", "#a"]


def test_match_is_located_literally():
    text, match = extract_pattern("x <a+b(c)*> y", r"<.*?>")

    assert text == "x y"
    assert match == "<a+b(c)*>"


def test_idempotent_once_nothing_matches():
    text, _ = extract_pattern("Lunch {19%} with team", r"\{.*?\}")

    assert extract_pattern(text, r"\{.*?\}") == (text, None)


@pytest.mark.parametrize(
    "original, pattern",
    [
        ("Lunch   {19%}  with team", r"\{.*?\}"),
        ("  <code> start", r"<.*?>"),
        ("end [2024-01-01]  ", r"\[.*?\]"),
        ("a\tb #tag c", r"#\S+"),
    ],
)
def test_reinserting_match_restores_text_up_to_whitespace(original, pattern):
    text, match = extract_pattern(original, pattern)

    before = " ".join(original[: original.find(match)].split())
    after = " ".join(original[original.find(match) + len(match) :].split())
    assert " ".join(text.split()) == trim(f"{before} {after}")

    restored = trim(f"{before} {match} {after}")
    assert restored == " ".join(original.split())


def test_trim():
    assert trim(" \n a b \t") == "a b"
