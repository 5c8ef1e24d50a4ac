"""単一ルート走査のテスト。"""

from __future__ import annotations

import os
from pathlib import Path

from uapiconf.models.fragment import FragmentKind
from uapiconf.resolver._filters import accept_any_file
from uapiconf.resolver._scanner import scan_dropin_dir, scan_main_file

_NULL = Path(os.devnull).resolve()


class TestScanMainFile:
    """scan_main_file のテスト。"""

    def test_regular_file(self, tmp_path: Path) -> None:
        """通常ファイル → メインファイルのフラグメント。"""
        (tmp_path / "foo.conf").write_text("", encoding="utf-8")
        fragment, failures = scan_main_file(2, tmp_path, "foo.conf", _NULL)
        assert fragment is not None
        assert fragment.kind is FragmentKind.MAIN
        assert fragment.origin_root_rank == 2
        assert fragment.relative_name == "foo.conf"
        assert fragment.absolute_path == tmp_path / "foo.conf"
        assert fragment.is_masked is False
        assert failures == []

    def test_absent(self, tmp_path: Path) -> None:
        """不在 → None、失敗なし。"""
        fragment, failures = scan_main_file(0, tmp_path, "foo.conf", _NULL)
        assert fragment is None
        assert failures == []

    def test_masked(self, tmp_path: Path) -> None:
        """ヌルデバイスへのリンク → is_masked=True。"""
        (tmp_path / "foo.conf").symlink_to(os.devnull)
        fragment, _ = scan_main_file(0, tmp_path, "foo.conf", _NULL)
        assert fragment is not None
        assert fragment.is_masked is True

    def test_symlink_to_directory(self, tmp_path: Path) -> None:
        """ディレクトリへのリンク → None、失敗なし。"""
        (tmp_path / "target").mkdir()
        (tmp_path / "foo.conf").symlink_to(tmp_path / "target")
        fragment, failures = scan_main_file(0, tmp_path, "foo.conf", _NULL)
        assert fragment is None
        assert failures == []


class TestScanDropinDir:
    """scan_dropin_dir のテスト。"""

    def test_entries_in_byte_order(self, tmp_path: Path) -> None:
        """エントリはバイト順で返る。"""
        d = tmp_path / "foo.conf.d"
        d.mkdir()
        for name in ("b.conf", "A.conf", "a.conf"):
            (d / name).write_text("", encoding="utf-8")
        fragments, failures = scan_dropin_dir(
            0, tmp_path, "foo.conf.d", accept_any_file, _NULL
        )
        assert [f.relative_name for f in fragments] == ["A.conf", "a.conf", "b.conf"]
        assert all(f.kind is FragmentKind.DROPIN for f in fragments)
        assert failures == []

    def test_filter_rejects(self, tmp_path: Path) -> None:
        """フィルターで拒否されたエントリは含まれない。"""
        d = tmp_path / "foo.conf.d"
        d.mkdir()
        (d / "keep.conf").write_text("", encoding="utf-8")
        (d / "skip.txt").write_text("", encoding="utf-8")
        fragments, _ = scan_dropin_dir(
            0,
            tmp_path,
            "foo.conf.d",
            lambda name, mode: name.endswith(".conf"),
            _NULL,
        )
        assert [f.relative_name for f in fragments] == ["keep.conf"]

    def test_absent_dir(self, tmp_path: Path) -> None:
        """ディレクトリ不在 → 空、失敗なし。"""
        fragments, failures = scan_dropin_dir(
            0, tmp_path, "foo.conf.d", accept_any_file, _NULL
        )
        assert fragments == []
        assert failures == []

    def test_masked_entry_is_kept_as_candidate(self, tmp_path: Path) -> None:
        """マスクされたエントリも候補として返す（除外はリゾルバーが行う）。"""
        d = tmp_path / "foo.conf.d"
        d.mkdir()
        (d / "10-x.conf").symlink_to(os.devnull)
        fragments, _ = scan_dropin_dir(
            0, tmp_path, "foo.conf.d", accept_any_file, _NULL
        )
        assert len(fragments) == 1
        assert fragments[0].is_masked is True
