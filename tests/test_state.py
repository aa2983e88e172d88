from dungeonfarm.state import GameState


def test_advance_floor_increments_score():
    state = GameState()
    before = state.score
    state.advance_floor()
    assert state.score == before + 1


def test_record_high_score_keeps_best_and_resets_score():
    state = GameState(score=7, high_score=3)
    state.record_high_score()
    assert state.high_score == 7
    assert state.score == 0


def test_record_high_score_does_not_lower_best():
    state = GameState(score=2, high_score=9)
    state.record_high_score()
    assert state.high_score == 9
    assert state.score == 0


def test_defeat_boss_step_increments_counter():
    state = GameState()
    before = state.boss_count
    state.defeat_boss_step()
    state.defeat_boss_step()
    assert state.boss_count == before + 2


def test_reset_after_death_restores_defaults():
    state = GameState(boss_count=8, score=12, high_score=20, bread_count=5)
    state.reset_after_death()
    assert state == GameState()