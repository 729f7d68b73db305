import io

import pytest

from anagrams import main
from anagrams.errors import CandidateSourceUnavailable, EmptyQuery
from anagrams.letters import Query
from anagrams.solver import solver
from anagrams.solver.config import SolverConfig

from conftest import DORMITORY_WORDS, EAT_WORDS


def test_find_anagrams_eat():
    report = solver.find_anagrams(
        Query("eat"), EAT_WORDS, solver_config=SolverConfig(min_part=1)
    )

    assert report.seeded == 6
    assert report.letters == "aet"
    assert report.candidates == 4
    assert report.answers == [("ate", 9), ("eat", 9), ("tea", 9), ("a e t", 3)]


def test_find_anagrams_fold_case():
    report = solver.find_anagrams(
        Query("EAT"), ["eat", "Tea", "A"], solver_config=SolverConfig(fold_case=True, min_part=1)
    )

    assert report.query == "eat"
    assert report.seeded == 3
    assert report.answers == [("eat", 9), ("tea", 9)]


def test_find_anagrams_matches_case_literally_by_default():
    report = solver.find_anagrams(
        Query("EAT"), ["eat", "TEA"], solver_config=SolverConfig(fold_case=False, min_part=1)
    )
    assert report.answers == [("TEA", 9)]


def test_header_shows_folded_query():
    out = io.StringIO()
    solver.find_anagrams(
        Query("Dormitory"),
        DORMITORY_WORDS,
        solver_config=SolverConfig(fold_case=True, min_part=3),
        out=out,
    )
    assert "Finding anagram for word 'dormitory' (letters [dimoorrty])" in out.getvalue()


def test_find_anagrams_writes_progress():
    out = io.StringIO()
    solver.find_anagrams(
        Query("dormitory"), DORMITORY_WORDS, solver_config=SolverConfig(min_part=3), out=out
    )
    text = out.getvalue()

    assert "Finding anagram for word 'dormitory' (letters [dimoorrty]), length range [3-9]." in text
    assert "* permute into list[9] -> list[5] x list[4] = 1 * 2 = 2 combinations (1 kept)" in text
    assert "Total iterations: 6" in text


def test_find_anagrams_heuristic_min_part():
    report = solver.find_anagrams(
        Query("dirty room"),
        DORMITORY_WORDS,
        solver_config=SolverConfig(min_part=None, min_part_strategy="heuristic"),
    )
    assert report.stats.min_part == 3
    assert report.answers == [("dormitory", 81), ("dirty room", 41)]


def test_find_anagrams_unavailable_source(tmp_path):
    from anagrams.wordlist import read_candidates

    with pytest.raises(CandidateSourceUnavailable):
        solver.find_anagrams(Query("eat"), read_candidates(tmp_path / "missing"))


def test_run_empty_query(write_words):
    solver_config = SolverConfig(word_list_path=str(write_words(EAT_WORDS)))
    with pytest.raises(EmptyQuery):
        solver.run("  ", solver_config=solver_config, out=io.StringIO())


def test_run_missing_dictionary(tmp_path):
    solver_config = SolverConfig(word_list_path=str(tmp_path / "missing"))
    with pytest.raises(CandidateSourceUnavailable):
        solver.run("eat", solver_config=solver_config, out=io.StringIO())


def test_run_reports_answers(write_words):
    solver_config = SolverConfig(word_list_path=str(write_words(DORMITORY_WORDS)), min_part=3)
    out = io.StringIO()
    report = solver.run("dormitory", solver_config=solver_config, out=out, dump=True)
    text = out.getvalue()

    assert report.seeded == 6
    assert "Seeded 6 words from" in text
    assert "Current word list counts:" in text
    assert "* Scores[9]: 2" in text
    assert "Found 2 possible anagrams." in text
    assert "Found 2 answers." in text
    assert text.index(" * dormitory [score: 81]") < text.index(" * dirty room [score: 41]")


def test_run_dump_words(write_words):
    solver_config = SolverConfig(word_list_path=str(write_words(DORMITORY_WORDS)), min_part=3)
    out = io.StringIO()
    solver.run("dormitory", solver_config=solver_config, out=out, dump_words=True)
    assert "  * dirt room" in out.getvalue()


def test_run_fold_case(write_words):
    solver_config = SolverConfig(
        word_list_path=str(write_words(["Eat", "TEA"])), fold_case=True, min_part=1
    )
    report = solver.run("EAT", solver_config=solver_config, out=io.StringIO())
    assert report.answers == [("eat", 9), ("tea", 9)]


def test_run_log_dir(write_words, tmp_path):
    log_dir = tmp_path / "logs"
    solver_config = SolverConfig(
        word_list_path=str(write_words(DORMITORY_WORDS)), min_part=3, log_dir=str(log_dir)
    )
    out = io.StringIO()
    solver.run("dirty room", solver_config=solver_config, out=out)

    logfile = log_dir / "dirty_room.log"
    assert f"Log file: {logfile}" in out.getvalue()
    assert " * dirty room [score: 41]" in out.getvalue()
    log_text = logfile.read_text(encoding="utf-8")
    assert "Total iterations:" in log_text
    assert " * dormitory [score: 81]" in log_text


def test_main(write_words, capsys):
    path = write_words(DORMITORY_WORDS)
    assert main(["dirty room", "-d", str(path), "-m", "3"]) == 0
    captured = capsys.readouterr()
    assert " * dormitory [score: 81]" in captured.out
    assert " * dirty room [score: 41]" in captured.out


def test_main_limit(write_words, capsys):
    path = write_words(DORMITORY_WORDS)
    assert main(["dormitory", "--dictionary", str(path), "--min-part", "3", "--limit", "1"]) == 0
    out = capsys.readouterr().out
    assert " * dormitory [score: 81]" in out
    assert " * dirty room" not in out
    assert " ... and 1 more" in out


def test_main_exhaustive(write_words, capsys):
    path = write_words(EAT_WORDS)
    assert main(["eat", "-d", str(path), "-x"]) == 0
    assert " * a e t [score: 3]" in capsys.readouterr().out


def test_main_empty_query(write_words, capsys):
    path = write_words(EAT_WORDS)
    assert main(["   ", "-d", str(path)]) == 1
    assert "EmptyQuery" in capsys.readouterr().err


def test_main_missing_dictionary(tmp_path, capsys):
    assert main(["eat", "-d", str(tmp_path / "missing")]) == 1
    err = capsys.readouterr().err
    assert "CandidateSourceUnavailable" in err
    assert "'eat'" in err


def test_main_rejects_bad_min_part(capsys):
    with pytest.raises(SystemExit):
        main(["eat", "--min-part", "0"])
