"""
游戏控制器测试
Game Controller Tests
"""
import pytest

from conftest import FailingRandomSource, FixedRandomSource
from fair_rps.game import GameController, Outcome, RuleEngine, verify_commitment
from fair_rps.utils.exceptions import (
    CommitmentStateError, InsufficientEntropy, InvalidConfiguration, UnknownMove
)


@pytest.fixture
def controller(classic_moves, fixed_source):
    # 电脑固定出 scissors
    return GameController(RuleEngine(classic_moves), random_source=fixed_source)


class TestRound:
    """Test a full commit, play, reveal round."""

    def test_start_round_publishes_digest(self, controller):
        digest = controller.start_round()
        assert len(digest) == 64
        assert controller.current_digest == digest
        assert controller.is_round_pending
        assert controller.current_round == 1

    def test_play_win(self, controller):
        digest = controller.start_round()
        result = controller.play("rock")
        assert result.outcome == Outcome.WIN
        assert result.player_move == "rock"
        assert result.computer_move == "scissors"
        assert result.digest == digest
        assert result.verified
        assert verify_commitment(digest, result.key_hex, result.computer_move)
        assert not controller.is_round_pending
        assert controller.current_digest is None

    def test_play_by_index(self, controller):
        controller.start_round()
        assert controller.play(1).outcome == Outcome.LOSE

    def test_play_draw(self, controller):
        controller.start_round()
        assert controller.play("scissors").outcome == Outcome.DRAW

    def test_each_round_has_new_commitment(self, controller):
        first = controller.start_round()
        first_key = controller.play("rock").key_hex
        second = controller.start_round()
        second_result = controller.play("rock")
        assert first != second
        assert first_key != second_result.key_hex
        assert second_result.round_number == 2

    def test_round_result_dict(self, controller):
        controller.start_round()
        data = controller.play("paper").to_dict()
        assert data['outcome'] == "lose"
        assert data['computer_move'] == "scissors"
        assert data['verified'] is True

    def test_callback_errors_do_not_break_round(self, controller):
        def broken(result):
            raise RuntimeError("boom")

        controller.on_round_result = broken
        controller.start_round()
        assert controller.play("rock").outcome == Outcome.WIN


class TestRoundErrors:
    """Test error handling around rounds."""

    def test_unknown_move_keeps_round_pending(self, controller):
        digest = controller.start_round()
        with pytest.raises(UnknownMove):
            controller.play("lizard")
        assert controller.is_round_pending
        assert controller.play("rock").digest == digest

    def test_play_without_round(self, controller):
        with pytest.raises(CommitmentStateError):
            controller.play("rock")

    def test_play_twice(self, controller):
        controller.start_round()
        controller.play("rock")
        with pytest.raises(CommitmentStateError):
            controller.play("rock")

    def test_start_round_twice(self, controller):
        controller.start_round()
        with pytest.raises(CommitmentStateError):
            controller.start_round()

    def test_entropy_failure(self, classic_moves):
        controller = GameController(RuleEngine(classic_moves), random_source=FailingRandomSource())
        with pytest.raises(InsufficientEntropy):
            controller.start_round()
        assert not controller.is_round_pending

    def test_invalid_security_parameters(self, classic_moves):
        with pytest.raises(InvalidConfiguration):
            GameController(RuleEngine(classic_moves), key_bytes=8)
        with pytest.raises(InvalidConfiguration):
            GameController(RuleEngine(classic_moves), hash_name="md5")


def test_secure_default_source(rpsls_moves):
    controller = GameController(RuleEngine(rpsls_moves), hash_name="sha3_256")
    digest = controller.start_round()
    result = controller.play("spock")
    assert result.computer_move in rpsls_moves
    assert verify_commitment(digest, result.key_hex, result.computer_move, "sha3_256")


def test_fixed_source_reused_across_rounds(classic_moves):
    controller = GameController(RuleEngine(classic_moves), random_source=FixedRandomSource(index=0))
    controller.start_round()
    assert controller.play("paper").outcome == Outcome.WIN
