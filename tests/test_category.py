from ledger_export.category import account_name, parse_category


def test_plain_hierarchy():
    hierarchy, tags = parse_category("Expenses\\Travel\\Hotel")

    assert hierarchy == ["Expenses", "Travel", "Hotel"]
    assert len(tags) == 0


def test_empty_override_drops_level():
    hierarchy, _ = parse_category("Expenses\\Travel\\Etc. []")

    assert hierarchy == ["Expenses", "Travel"]


def test_override_replaces_collected_levels():
    hierarchy, _ = parse_category("My Business\\Travel [Expenses:Travel]\\Accommodation")

    assert hierarchy == ["Expenses", "Travel", "Accommodation"]


def test_deep_override_discards_everything_above():
    hierarchy, _ = parse_category("A\\B\\C\\D [X]")

    assert hierarchy == ["X"]


def test_tags_on_deeper_levels_win():
    hierarchy, tags = parse_category("Expenses #p:1 {7%} \\Travel #p:2 {19%}")

    assert hierarchy == ["Expenses", "Travel"]
    assert tags.get("p") == "2"
    assert tags.get("tax") == "19%"


def test_only_empty_override_gives_empty_hierarchy():
    assert parse_category("[]")[0] == []
    assert parse_category("Travel []")[0] == []
    assert parse_category("\\\\")[0] == []


def test_account_name_collapses_whitespace():
    assert account_name(["My  Business", "Travel\tCosts"]) == "My Business:Travel Costs"
    assert account_name([]) == ""
