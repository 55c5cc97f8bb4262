"""
Tests for the evaluation harness and command line.
"""

import json

import pytest

from boxgame.core.config_loader import load_config
from boxgame.evaluation.run_eval import (
    evaluate_bank,
    evaluate_sequence,
    load_token_bank,
    main,
)


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def bank_file(tmp_path):
    path = tmp_path / "bank.json"
    path.write_text(json.dumps({
        "sequences": {
            "fib4": [1, 1, 2, 3],
            "fib8": [1, 1, 2, 3, 5, 8, 13, 21],
            "empty": [],
        }
    }))
    return str(path)


class TestTokenBank:
    """Test loading token banks."""

    def test_default_bank(self):
        bank = load_token_bank()
        assert bank["fibonacci_4"] == [1, 1, 2, 3]
        assert bank["fibonacci_8"] == [1, 1, 2, 3, 5, 8, 13, 21]
        assert bank["empty"] == []

    def test_custom_bank(self, bank_file):
        assert list(load_token_bank(bank_file)) == ["fib4", "fib8", "empty"]

    def test_missing_sequences_key(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"seeds": [1, 2]}))
        with pytest.raises(ValueError, match="sequences"):
            load_token_bank(str(path))

    def test_negative_token_in_bank(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"sequences": {"bad": [1, -2]}}))
        with pytest.raises(ValueError, match="non-negative"):
            load_token_bank(str(path))


class TestEvaluation:
    """Test batch evaluation statistics."""

    def test_single_sequence(self, config):
        result = evaluate_sequence("fib4", [1, 1, 2, 3], config=config)
        assert result.result.scores == (13.0, 25.0)
        assert result.tokens == [1, 1, 2, 3]

    def test_summary_statistics(self, config, bank_file):
        bank = load_token_bank(bank_file)
        summary = evaluate_bank(bank, config=config, verbose=False)

        assert len(summary.results) == 3
        assert summary.mean_scores[0] == pytest.approx((13.0 + 155.0 + 0.0) / 3)
        assert summary.mean_scores[1] == pytest.approx((25.0 + 366.25 + 0.0) / 3)
        assert summary.max_scores == [155.0, 366.25]
        assert summary.wins == [0, 2]
        assert summary.draws == 1

    def test_empty_bank(self, config):
        summary = evaluate_bank({}, config=config, verbose=False)
        assert summary.results == []
        assert summary.wins == [0, 0]
        assert summary.draws == 0

    def test_verbose_prints_summary(self, config, bank_file, capsys):
        evaluate_bank(load_token_bank(bank_file), config=config, verbose=True)
        out = capsys.readouterr().out
        assert "EVALUATION SUMMARY" in out
        assert "Scores: player A 155, player B 366.25" in out


class TestCommandLine:
    """Test the CLI entry point."""

    def test_tokens(self, capsys):
        assert main(["--tokens", "1", "1", "2", "3"]) == 0
        assert capsys.readouterr().out.strip() == "Scores: player A 13, player B 25"

    def test_no_tokens(self, capsys):
        assert main(["--tokens"]) == 0
        assert capsys.readouterr().out.strip() == "Scores: player A 0, player B 0"

    def test_bank(self, bank_file, capsys):
        assert main(["--bank", bank_file, "--quiet"]) == 0
        assert capsys.readouterr().out == ""

    def test_default_bank(self, capsys):
        assert main([]) == 0
        assert "Sequences played: 7" in capsys.readouterr().out

    def test_negative_token(self, capsys):
        assert main(["--tokens", "1", "-2"]) == 1
        assert "non-negative" in capsys.readouterr().out

    def test_missing_bank(self, tmp_path, capsys):
        assert main(["--bank", str(tmp_path / "missing.json")]) == 1
        assert "Error loading token bank" in capsys.readouterr().out

    def test_missing_config(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "missing.yaml"), "--tokens", "1"]) == 1
        assert "Error loading config" in capsys.readouterr().out

    @pytest.mark.parametrize("text", [
        "boxes: [\n",
        "boxes:\n  - initial_weight: 0.0\n",
        "boxes:\n  - kind: green\nscoring: 5\n",
        "boxes:\n  - kind: green\n    initial_weight: .nan\n",
        "players:\n  names: AB\nboxes:\n  - kind: green\n",
    ])
    def test_malformed_config(self, tmp_path, capsys, text):
        path = tmp_path / "game_config.yaml"
        path.write_text(text)

        assert main(["--config", str(path), "--tokens", "1"]) == 1
        assert "Error loading config" in capsys.readouterr().out

    def test_config_with_empty_sections(self, tmp_path, capsys):
        path = tmp_path / "game_config.yaml"
        path.write_text("boxes:\n  - kind: green\nscoring:\n")

        assert main(["--config", str(path), "--tokens", "2"]) == 0
        assert capsys.readouterr().out.strip() == "Scores: player A 4, player B 0"

    def test_debug(self, capsys):
        assert main(["--tokens", "1", "1", "--debug"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0].startswith("[DEBUG] Turn 0")
        assert out[-1] == "Scores: player A 1, player B 1"
