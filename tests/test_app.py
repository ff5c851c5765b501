"""
交互应用测试
Interactive Application Tests
"""
import pytest

from conftest import FailingRandomSource, FixedRandomSource
from fair_rps.app import Application
from fair_rps.game import verify_commitment
from fair_rps.utils.exceptions import ConfigurationException, InsufficientEntropy, InvalidConfiguration


def _scripted_app(moves, inputs, source=None, config_path=None):
    answers = iter(inputs)
    output = []
    app = Application(
        moves,
        config_path=config_path,
        random_source=source or FixedRandomSource(index=2),
        input_func=lambda prompt: next(answers),
        output_func=output.append
    )
    return app, output


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("security:\n  key_bytes: 32\n  hash: sha256\n", encoding="utf-8")
    return str(path)


class TestMenu:
    """Test the interactive menu loop."""

    def test_exit_immediately(self, classic_moves, config_file):
        app, output = _scripted_app(classic_moves, ["0"], config_path=config_file)
        app.run()
        assert output[0].startswith("HMAC: ")
        assert "Available moves:" in output
        assert "1 - rock" in output
        assert "3 - scissors" in output
        assert "0 - exit" in output
        assert "? - help" in output
        assert output[-1] == "Exiting..."

    def test_play_round_by_number(self, classic_moves, config_file):
        app, output = _scripted_app(classic_moves, ["1", "0"], config_path=config_file)
        app.run()
        digest = output[0][len("HMAC: "):]

        assert "Your move: rock" in output
        assert "Computer move: scissors" in output
        assert "You win!" in output
        key_line = next(line for line in output if line.startswith("HMAC key: "))
        assert verify_commitment(digest, key_line[len("HMAC key: "):], "scissors")
        assert any(line.startswith("Verified: HMAC-SHA256") for line in output)

        # 新回合公布新的 HMAC
        next_digest = [line for line in output if line.startswith("\nHMAC: ")]
        assert len(next_digest) == 1
        assert next_digest[0].strip() != output[0]

    def test_play_round_by_name(self, classic_moves, config_file):
        app, output = _scripted_app(classic_moves, ["paper", "0"], config_path=config_file)
        app.run()
        assert "You lose!" in output

    def test_draw(self, classic_moves, config_file):
        app, output = _scripted_app(classic_moves, ["3", "0"], config_path=config_file)
        app.run()
        assert "Draw!" in output

    def test_help_table(self, classic_moves, config_file):
        app, output = _scripted_app(classic_moves, ["?", "0"], config_path=config_file)
        app.run()
        assert any("v User / PC >" in line for line in output)

    @pytest.mark.parametrize("bad", ["4", "-1", "lizard", "Rock", "", "1.5"])
    def test_invalid_input_reprompts(self, classic_moves, config_file, bad):
        app, output = _scripted_app(classic_moves, [bad, "0"], config_path=config_file)
        app.run()
        assert "Invalid input. Please try again." in output
        assert not any(line.startswith("Your move") for line in output)

    def test_input_is_stripped(self, classic_moves, config_file):
        app, output = _scripted_app(classic_moves, ["  2 ", "0"], config_path=config_file)
        app.run()
        assert "Your move: paper" in output


class TestInitialization:
    """Test configuration and validation before play."""

    @pytest.mark.parametrize("moves", [[], ["rock", "paper"], ["a", "b", "c", "a"]])
    def test_invalid_moves(self, moves, config_file):
        app, output = _scripted_app(moves, [], config_path=config_file)
        with pytest.raises(InvalidConfiguration):
            app.initialize()
        assert app.game_controller is None
        assert output == []

    def test_security_config_applied(self, classic_moves, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("security:\n  key_bytes: 64\n  hash: sha512\n"
                        "display:\n  table_format: plain\n", encoding="utf-8")
        app, output = _scripted_app(classic_moves, ["1", "0"], config_path=str(path))
        app.run()
        assert len(output[0]) == len("HMAC: ") + 128
        key_line = next(line for line in output if line.startswith("HMAC key: "))
        assert len(key_line) == len("HMAC key: ") + 128
        assert app.table_format == "plain"

    def test_bad_key_length_in_config(self, classic_moves, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("security:\n  key_bytes: 8\n", encoding="utf-8")
        app, _ = _scripted_app(classic_moves, [], config_path=str(path))
        with pytest.raises(InvalidConfiguration):
            app.initialize()

    def test_missing_config_file(self, classic_moves, tmp_path):
        app, _ = _scripted_app(classic_moves, [], config_path=str(tmp_path / "missing.yaml"))
        with pytest.raises(FileNotFoundError):
            app.initialize()

    def test_entropy_failure_aborts(self, classic_moves, config_file):
        app, output = _scripted_app(classic_moves, ["0"], source=FailingRandomSource(),
                                    config_path=config_file)
        with pytest.raises(InsufficientEntropy):
            app.run()
        assert output == []

    @pytest.mark.parametrize("value", ["fancy", "null"])
    def test_bad_table_format_in_config(self, classic_moves, tmp_path, value):
        path = tmp_path / "config.yaml"
        path.write_text(f"display:\n  table_format: {value}\n", encoding="utf-8")
        app, output = _scripted_app(classic_moves, [], config_path=str(path))
        with pytest.raises(ConfigurationException) as exc_info:
            app.initialize()
        assert exc_info.value.config_key == "display.table_format"
        assert app.game_controller is None
        assert output == []
