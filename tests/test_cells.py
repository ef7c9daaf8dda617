from puyo.cells import CellType, ChainInfo


def test_chain_info_defaults():
    info = ChainInfo()
    assert info.chain_count == 0
    assert info.group_sizes == []
    assert info.colors == set()
    assert info.total_erased == 0
    assert info.erased is False
    assert info.color_count == 0


def test_chain_info_defaults_are_not_shared():
    first = ChainInfo()
    second = ChainInfo()
    first.group_sizes.append(4)
    first.colors.add(CellType.RED)
    assert second.group_sizes == []
    assert second.colors == set()


def test_color_count_counts_distinct_colors():
    info = ChainInfo(colors={CellType.RED, CellType.BLUE})
    info.colors.add(CellType.RED)
    assert info.color_count == 2


def test_cell_type_lookup_round_trip():
    for cell in CellType:
        assert CellType(cell.value) is cell
        assert CellType[cell.name] is cell


def test_cell_type_order_matches_declaration():
    expected = [
        "EMPTY",
        "WALL",
        "RED",
        "GREEN",
        "YELLOW",
        "BLUE",
        "PURPLE",
        "GARBAGE",
    ]
    values = sorted(CellType[name].value for name in expected)
    assert [CellType(value).name for value in values] == expected