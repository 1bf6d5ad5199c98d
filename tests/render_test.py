from dynamic_sudoku.render import block_edges, board_to_csv, format_board


def test_format_board_4x4():
    board = [
        [1, 0, 3, 0],
        [0, 0, 0, 0],
        [0, 4, 0, 2],
        [0, 0, 0, 1],
    ]
    line = "-" * 17
    assert format_board(board).splitlines() == [
        line,
        "| 1 . | 3 . |",
        "| . . | . . |",
        line,
        "| . 4 | . 2 |",
        "| . . | . 1 |",
        line,
    ]


def test_format_board_placeholder():
    out = format_board([[0]], placeholder="_")
    assert out == "-----\n| _ |\n-----"


def test_board_to_csv():
    assert board_to_csv([[1, 2], [0, 4]]) == b"1,2\n0,4\n"


def test_block_edges_follow_base():
    assert block_edges(0, 0, 3) == (True, True, False, False)
    assert block_edges(2, 5, 3) == (False, False, True, True)
    assert block_edges(4, 4, 3) == (False, False, False, False)
    assert block_edges(1, 2, 2) == (False, True, True, False)
