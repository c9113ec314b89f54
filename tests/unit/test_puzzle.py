"""Unit tests for the puzzle entry points and CLI."""

import pytest

from pulsesim import puzzle
from pulsesim.cli import main
from pulsesim.core.parser import ParseError


class TestPuzzle:
    """Tests for part1 and part2."""

    def test_part1(self, chain_text, feedback_text):
        assert puzzle.part1(chain_text) == "32000000"
        assert puzzle.part1(feedback_text) == "11687500"

    def test_part1_custom_presses(self, chain_text):
        assert puzzle.part1(chain_text, presses=1) == "32"

    def test_part2(self, counters_text):
        assert puzzle.part2(counters_text) == "4"

    def test_part2_missing_target(self, chain_text):
        with pytest.raises(ValueError):
            puzzle.part2(chain_text)

    def test_parse_error_propagates(self):
        with pytest.raises(ParseError):
            puzzle.part1("broadcaster => a")


class TestCli:
    """Tests for the pulsesim command."""

    def _write(self, tmp_path, text):
        path = tmp_path / "input.txt"
        path.write_text(text)
        return path

    def test_part1(self, tmp_path, capsys, chain_text):
        path = self._write(tmp_path, chain_text)
        assert main([str(path), "--part", "1"]) == 0
        assert "Answer for part 1 is 32000000" in capsys.readouterr().out

    def test_part1_presses(self, tmp_path, capsys, feedback_text):
        path = self._write(tmp_path, feedback_text)
        assert main([str(path), "-p", "1", "--presses", "1"]) == 0
        assert "is 16 " in capsys.readouterr().out

    def test_part2(self, tmp_path, capsys, counters_text):
        path = self._write(tmp_path, counters_text)
        assert main([str(path), "-p", "2"]) == 0
        assert "Answer for part 2 is 4" in capsys.readouterr().out

    def test_plot(self, tmp_path, capsys, chain_text):
        path = self._write(tmp_path, chain_text)
        plot = tmp_path / "counts.png"
        assert main([str(path), "-p", "1", "--presses", "20", "--plot", str(plot)]) == 0
        assert plot.exists()
        assert "is 12800 " in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.txt"), "-p", "1"]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_parse_error(self, tmp_path, capsys):
        path = self._write(tmp_path, "broadcaster -> a\n*a -> b\n")
        assert main([str(path), "-p", "1"]) == 1
        assert "line 2" in capsys.readouterr().err

    def test_max_messages(self, tmp_path, capsys, loop_text):
        path = self._write(tmp_path, loop_text)
        assert main([str(path), "-p", "1", "--max-messages", "50"]) == 1
        assert "did not quiesce" in capsys.readouterr().err

    def test_invalid_part(self, tmp_path, chain_text):
        path = self._write(tmp_path, chain_text)
        with pytest.raises(SystemExit):
            main([str(path), "-p", "3"])

    @pytest.mark.parametrize(
        "flags", [["--presses", "-5"], ["--presses", "0"], ["--max-messages", "-1"]]
    )
    def test_non_positive_counts_rejected(self, tmp_path, capsys, chain_text, flags):
        path = self._write(tmp_path, chain_text)
        with pytest.raises(SystemExit):
            main([str(path), "-p", "1", *flags])
        assert "positive integer" in capsys.readouterr().err

    def test_missing_broadcaster(self, tmp_path, capsys):
        path = self._write(tmp_path, "%a -> b\n&b -> a\n")
        assert main([str(path), "-p", "1"]) == 1
        assert "no broadcaster" in capsys.readouterr().err
