import datetime as dt
import io
import json
from pathlib import Path

import pytest

from iching_daily import cli
from iching_daily.derivation import DerivationEngine
from iching_daily.reveal import RevealScheduler
from iching_daily.store import DailyCastStore, DailyRecord

from conftest import ScriptedEntropy, cast_bytes, stable_lines

engine = DerivationEngine()


def paths(tmp_path):
    return ["--cache", str(tmp_path / "iching.json"), "--history-file", str(tmp_path / "iching.jsonl")]


def test_verify_mode(capsys):
    assert cli.main(["--verify"]) == 0
    assert "All 64" in capsys.readouterr().out


def test_hook_first_call_prints_one_line(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"prompt": "hello"}'))
    assert cli.main(paths(tmp_path)) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    assert " — " in out[0]

    saved = json.loads((tmp_path / "iching.json").read_text(encoding="utf-8"))
    assert saved["date"] == dt.date.today().isoformat()
    assert saved["revealed"] is True


def test_hook_ignores_non_json_payload(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("not json"))
    assert cli.main(paths(tmp_path)) == 0
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_hook_swallows_entropy_failure(tmp_path, monkeypatch, capsys):
    def broken(n):
        raise OSError("entropy unavailable")

    monkeypatch.setattr("iching_daily.entropy.secrets.token_bytes", broken)
    monkeypatch.setattr("sys.stdin", io.StringIO("{}"))
    assert cli.main(paths(tmp_path)) == 0
    assert capsys.readouterr().out == ""
    assert not (tmp_path / "iching.json").exists()


def test_run_hook_day_rollover(tmp_path):
    store = DailyCastStore(tmp_path / "iching.json", tmp_path / "iching.jsonl")
    yesterday = DailyRecord(date="2026-10-15", cast=engine.derive(stable_lines(29)), revealed=True)
    store.save(yesterday)

    scheduler = RevealScheduler(ScriptedEntropy(data=cast_bytes([7, 8, 8, 8, 7, 8])))
    output = cli.run_hook(store, scheduler, today=dt.date(2026, 10, 16), stdin=io.StringIO("{}"))

    assert output == "䷂ 屯 (Zhūn) — 雲雷屯，君子以經綸"
    history = store.read_history()
    assert len(history) == 1
    assert history[0].date == "2026-10-15"
    assert history[0].cast == yesterday.cast

    record = store.load()
    assert record.date == "2026-10-16"
    assert record.cast.primary == 3
    assert record.revealed is True


def test_run_hook_recovers_from_corrupt_record(tmp_path):
    store = DailyCastStore(tmp_path / "iching.json", tmp_path / "iching.jsonl")
    (tmp_path / "iching.json").write_text("{broken", encoding="utf-8")
    scheduler = RevealScheduler(ScriptedEntropy(data=cast_bytes([7] * 6)))
    output = cli.run_hook(store, scheduler, today=dt.date(2026, 10, 16))
    assert output.startswith("䷀ 乾 (Qián)")
    assert store.read_history() == []


def test_run_hook_same_day_does_not_archive(tmp_path):
    store = DailyCastStore(tmp_path / "iching.json", tmp_path / "iching.jsonl")
    store.save(DailyRecord(date="2026-10-16", cast=engine.derive(stable_lines(1)), revealed=True))
    scheduler = RevealScheduler(ScriptedEntropy(draws=[0.9]))
    assert cli.run_hook(store, scheduler, today=dt.date(2026, 10, 16)) is None
    assert not (tmp_path / "iching.jsonl").exists()
    assert store.load().revealed is True


def test_show_without_todays_cast(tmp_path, capsys):
    assert cli.main(paths(tmp_path) + ["--show"]) == 0
    assert "No hexagram cast yet today" in capsys.readouterr().out


def test_show_displays_todays_cast(tmp_path, capsys):
    store = DailyCastStore(tmp_path / "iching.json", tmp_path / "iching.jsonl")
    record = DailyRecord(date=dt.date.today().isoformat(), cast=engine.derive(stable_lines(1)), revealed=True)
    store.save(record)
    assert cli.main(paths(tmp_path) + ["--show"]) == 0
    out = capsys.readouterr().out
    assert "Primary Hexagram" in out
    assert "自綜" in out
    assert store.load() == record


def test_history_mode(tmp_path, capsys):
    assert cli.main(paths(tmp_path) + ["--history"]) == 0
    assert "No archived casts yet" in capsys.readouterr().out


def test_hook_writes_utf8_when_stdout_is_not(tmp_path, monkeypatch):
    raw = io.BytesIO()
    monkeypatch.setattr("sys.stdout", io.TextIOWrapper(raw, encoding="cp1252"))
    monkeypatch.setattr("sys.stdin", io.StringIO("{}"))
    assert cli.main(paths(tmp_path)) == 0

    out = raw.getvalue().decode("utf-8").splitlines()
    assert len(out) == 1
    assert " — " in out[0]
    assert json.loads((tmp_path / "iching.json").read_text(encoding="utf-8"))["revealed"] is True


def test_write_line_on_plain_text_stream():
    stream = io.StringIO()
    cli.write_line("䷀ 乾 (Qián)", stream)
    assert stream.getvalue() == "䷀ 乾 (Qián)\n"


def test_run_hook_failed_write_keeps_day_fresh(tmp_path):
    store = DailyCastStore(tmp_path / "iching.json", tmp_path / "iching.jsonl")
    scheduler = RevealScheduler(ScriptedEntropy(data=cast_bytes([7] * 6)))

    def broken(text):
        raise UnicodeEncodeError("cp1252", text, 0, 1, "character maps to <undefined>")

    with pytest.raises(UnicodeEncodeError):
        cli.run_hook(store, scheduler, today=dt.date(2026, 10, 16), emit=broken)
    assert store.load() is None


def test_hook_accepts_undecodable_payload(tmp_path, monkeypatch, capsys):
    payload = io.TextIOWrapper(io.BytesIO(b'{"prompt": "\xff\xfe"}'), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", payload)
    assert cli.main(paths(tmp_path)) == 0
    assert len(capsys.readouterr().out.splitlines()) == 1
    assert (tmp_path / "iching.json").exists()


def test_read_payload_ignores_bad_bytes():
    cli.read_payload(io.TextIOWrapper(io.BytesIO(b"\xff"), encoding="utf-8"))
    cli.read_payload(io.StringIO("not json"))


def test_run_hook_failed_save_does_not_archive(tmp_path, monkeypatch):
    store = DailyCastStore(tmp_path / "iching.json", tmp_path / "iching.jsonl")
    store.save(DailyRecord(date="2026-10-15", cast=engine.derive(stable_lines(29)), revealed=True))

    def broken(record):
        raise OSError("disk full")

    monkeypatch.setattr(store, "save", broken)
    scheduler = RevealScheduler(ScriptedEntropy(data=cast_bytes([7] * 6)))
    with pytest.raises(OSError):
        cli.run_hook(store, scheduler, today=dt.date(2026, 10, 16))
    assert store.read_history() == []


def test_hook_without_home_directory_is_silent(monkeypatch, capsys):
    def no_home():
        raise RuntimeError("Could not determine home directory")

    for name in ("ICHING_DAILY_HOME", "ICHING_DAILY_CACHE", "ICHING_DAILY_HISTORY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(Path, "home", no_home)
    monkeypatch.setattr("sys.stdin", io.StringIO("{}"))
    assert cli.main([]) == 0
    assert capsys.readouterr().out == ""
