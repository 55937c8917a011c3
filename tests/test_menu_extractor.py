from extractors.menu import MenuExtractor


def test_total_weight_defaults_to_qty_times_weight(menu_header):
    rows = [menu_header, [1, "Canapé", "pcs", 120, 150, None, None, 80, None]]

    items = MenuExtractor("guest").extract_items("Меню", rows)

    assert len(items) == 1
    item = items[0]
    assert item.menu_type == "guest"
    assert item.total_weight_g == 9600
    assert item.total_amount == 18000
    assert item.note is None


def test_explicit_columns_win(menu_header):
    rows = [menu_header, [1, "Soup", "portion", 20, 90, 2000, "hot", 300, 5500]]

    item = MenuExtractor("staff").extract_items("Меню стафф", rows)[0]

    assert item.menu_type == "staff"
    assert item.total_amount == 2000
    assert item.total_weight_g == 5500
    assert item.note == "hot"
    assert item.unit == "portion"


def test_menu_type_comes_from_instance_not_rows(menu_header):
    rows = [menu_header, [1, "Staff lunch", None, 1, 1, None, None, 0, None]]

    assert MenuExtractor("guest").extract_items("x", rows)[0].menu_type == "guest"
    assert MenuExtractor("staff").extract_items("x", rows)[0].menu_type == "staff"


def test_note_only_rows_are_skipped_and_tail_ends_table(menu_header):
    rows = (
        [menu_header]
        + [[1, "Bread", "kg", 2, 3, None, None, 1000, None]]
        + [[None, None, None, None, None, None, "serve warm"]]
        + [[2, "Butter", "kg", 1, 5, None, None, 500, None]]
        + [[None] * 9] * 10
        + [[None, "Allergens: nuts"]]
    )

    items = MenuExtractor().extract_items("Меню", rows)

    assert [i.position for i in items] == ["Bread", "Butter"]


def test_english_header(menu_header):
    rows = [["#", "Position", "Unit"], [1, "Salad", "pcs", 10, 5]]

    items = MenuExtractor().extract_items("Menu", rows)

    assert [(i.position, i.total_amount, i.total_weight_g) for i in items] == [
        ("Salad", 50, 0)
    ]


def test_missing_header():
    assert MenuExtractor().extract("Меню", [["Canapé", 1, 2]]).menu_items == []
