from mazerunner.collectibles import Collectible


def test_new_collectible_is_not_collected():
    star = Collectible()
    assert star.collected is False
    assert star.display() == "*"


def test_collect_marks_as_collected():
    star = Collectible()
    star.collect()
    assert star.collected is True
    assert star.display() == " "


def test_collect_is_idempotent():
    star = Collectible()
    star.collect()
    star.collect()
    assert star.collected is True
    assert star.display() == " "