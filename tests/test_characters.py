from mazerunner.characters import Character


def test_position_reflects_constructor_arguments():
    character = Character(3, 7)
    assert character.position() == (3, 7)
    assert character.x == 3
    assert character.y == 7


def test_move_to_updates_position():
    character = Character(0, 0)
    character.move_to(5, 2)
    assert character.position() == (5, 2)


def test_move_to_can_be_repeated():
    character = Character(1, 1)
    character.move_to(4, 9)
    character.move_to(8, 6)
    assert character.position() == (8, 6)