from mazerunner.player import Player


def test_default_player():
    player = Player()
    assert player.position() == (1, 1)
    assert player.score == 0


def test_update_score_adds_step():
    player = Player()
    player.update_score()
    assert player.score == 10


def test_update_score_accumulates():
    player = Player()
    for _ in range(5):
        player.update_score()
    assert player.score == 5 * Player.SCORE_STEP


def test_score_can_be_carried_over():
    player = Player(score=70)
    player.update_score()
    assert player.score == 70 + Player.SCORE_STEP
    assert player.position() == (1, 1)