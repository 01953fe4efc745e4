import pytest

from cubestructs.cube import Cube
from cubestructs.pixel import HSLAPixel
from cubestructs.tower import Game, IllegalMoveError, Move, Stack, main


def _stack_of(*lengths):
    stack = Stack()
    for length in lengths:
        stack.push(Cube(length, HSLAPixel.BLUE))
    return stack


def test_push_and_iterate_bottom_to_top():
    stack = _stack_of(4, 3, 2, 1)
    assert [cube.length for cube in stack] == [4, 3, 2, 1]
    assert len(stack) == 4


def test_push_larger_on_smaller_raises():
    stack = _stack_of(2)
    with pytest.raises(IllegalMoveError):
        stack.push(Cube(3, HSLAPixel.ORANGE))
    assert len(stack) == 1


def test_push_equal_length_is_allowed():
    stack = _stack_of(2, 2)
    assert len(stack) == 2


def test_remove_top_returns_last_pushed():
    stack = _stack_of(4, 3)
    top = stack.remove_top()
    assert top.length == 3
    assert [cube.length for cube in stack] == [4]


def test_peek_top_does_not_remove():
    stack = _stack_of(4, 1)
    assert stack.peek_top().length == 1
    assert len(stack) == 2


def test_empty_stack_operations_raise():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.remove_top()
    with pytest.raises(IndexError):
        stack.peek_top()


def test_stack_str_lists_lengths():
    assert str(_stack_of(4, 3, 2, 1)) == "4 3 2 1"
    assert str(Stack()) == ""


def test_initial_game_state():
    game = Game()
    assert [len(stack) for stack in game.stacks] == [4, 0, 0]
    assert [cube.color for cube in game.stacks[0]] == [
        HSLAPixel.BLUE,
        HSLAPixel.ORANGE,
        HSLAPixel.PURPLE,
        HSLAPixel.YELLOW,
    ]
    assert not game.is_solved()
    assert str(game) == "Stack[0]: 4 3 2 1\nStack[1]: \nStack[2]: "


def test_recursive_solve_finishes_on_last_stack():
    game = Game()
    moves = game.solve()
    assert game.is_solved()
    assert str(game) == "Stack[0]: \nStack[1]: \nStack[2]: 4 3 2 1"
    assert len(moves) == 15


def test_iterative_solve_finishes_on_last_stack():
    game = Game()
    moves = game.solve_iterative()
    assert game.is_solved()
    assert [cube.length for cube in game.stacks[2]] == [4, 3, 2, 1]
    assert all(isinstance(move, Move) for move in moves) and moves


def test_both_strategies_make_the_same_moves():
    assert Game().solve() == Game().solve_iterative()


def test_moves_replay_legally():
    moves = Game().solve()
    replay = Game()
    for move in moves:
        cube = replay.stacks[move.source].remove_top()
        replay.stacks[move.target].push(cube)
    assert replay.is_solved()


def test_solving_a_solved_game_does_nothing_iteratively():
    game = Game()
    game.solve()
    assert game.solve_iterative() == []
    assert game.is_solved()


def test_main_prints_states(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Initial game state: \nStack[0]: 4 3 2 1")
    assert "Final game state: " in out
    assert out.rstrip("\n").endswith("Stack[2]: 4 3 2 1")


def test_main_iterative_matches_recursive(capsys):
    main([])
    recursive = capsys.readouterr().out
    main(["--iterative"])
    iterative = capsys.readouterr().out
    assert recursive == iterative