"""Tests for the Library application context."""

import json

import pytest

from shot_catalog.exceptions import ImportFormatError, ScanError, ValidationError
from shot_catalog.library import Library
from shot_catalog.models import CoverKind
from shot_catalog.stores.local_state import LocalState


class TestLoading:
    """Tests for startup and directory loading."""

    def test_load_remote_state(self, library, tag_remote, playlist_remote):
        tag_remote.tags = {"shotA": ["red"]}
        playlist_remote.playlists = {"Best": ["shotA"]}

        assert library.load_remote_state() is True
        assert library.tags.get("shotA") == ["red"]
        assert library.playlists.get("Best") == ["shotA"]

    def test_load_remote_state_failure_is_not_fatal(self, library, tag_remote):
        tag_remote.fail = True
        assert library.load_remote_state() is False
        assert len(library.tags) == 0

    def test_playlist_failure_keeps_previous_tags(self, library, tag_remote, playlist_remote):
        """Test a failed reload replaces neither store."""
        tag_remote.tags = {"shotA": ["red"]}
        assert library.load_remote_state() is True

        tag_remote.tags = {"shotB": ["blue"]}
        playlist_remote.fail = True

        assert library.load_remote_state() is False
        assert library.tags.as_dict() == {"shotA": ["red"]}

    def test_load_directory(self, library, shot_folder, directory_remote):
        shots = library.load_directory(shot_folder)

        assert shots.ids == ["shotA", "shotB"]
        assert shots.get("shotA").cover_kind == CoverKind.IMAGE
        assert shots.get("shotB").cover_kind == CoverKind.NONE
        assert directory_remote.saved == ["session_01"]
        assert library.recent_directories() == ["session_01"]

    def test_directory_save_failure_does_not_abort(self, library, shot_folder, directory_remote):
        directory_remote.fail = True
        assert len(library.load_directory(shot_folder)) == 2

    def test_rescan_releases_previous_collection(self, library, shot_folder):
        first = library.load_directory(shot_folder)
        old_refs = [ref for shot in first for ref in shot.references]
        assert all(ref in library.registry for ref in old_refs)

        second = library.load_directory(shot_folder)

        assert first.released is True
        assert not any(ref in library.registry for ref in old_refs)
        assert len(library.registry) == 2
        assert second is library.shots

    def test_failed_scan_leaves_empty_collection(self, library, shot_folder, tmp_path):
        first = library.load_directory(shot_folder)
        empty = tmp_path / "empty"
        empty.mkdir()

        with pytest.raises(ScanError):
            library.load_directory(empty)

        assert first.released
        assert len(library.shots) == 0

    def test_new_scan_clears_tag_filters(self, library, shot_folder):
        library.selection.toggle_tag_filter("red")
        library.selection.search_query = "forest"
        library.load_directory(shot_folder)
        assert library.selection.selected_tags == set()
        assert library.selection.search_query == ""

    def test_close_releases_shots(self, tag_remote, playlist_remote, shot_folder):
        with Library(tag_remote, playlist_remote) as lib:
            shots = lib.load_directory(shot_folder)
        assert shots.released


class TestCoversAndViews:
    """Tests for covers, filtering and the active playlist."""

    def test_set_cover_persists_across_scans(self, library, shot_folder, state):
        library.load_directory(shot_folder)

        assert library.set_cover("shotA", "shotA.mp4") is True
        assert library.shots.get("shotA").cover_kind == CoverKind.VIDEO
        assert state.shot_covers == {"shotA": "shotA.mp4"}

        library.load_directory(shot_folder)
        assert library.shots.get("shotA").cover_kind == CoverKind.VIDEO

    def test_set_cover_unknown_shot(self, library, shot_folder):
        library.load_directory(shot_folder)
        assert library.set_cover("nope", "x.png") is False

    def test_filtered_shots(self, library, shot_folder):
        library.load_directory(shot_folder)
        library.tags.add_tag("shotB", "red")

        library.selection.toggle_tag_filter("red")
        assert [s.id for s in library.filtered_shots()] == ["shotB"]

        library.selection.toggle_tag_filter("red")
        library.selection.search_query = "MISTY"
        assert [s.id for s in library.filtered_shots()] == ["shotA"]

    def test_toggle_requires_active_playlist(self, library):
        with pytest.raises(ValidationError):
            library.toggle_in_active_playlist("shotA")

    def test_active_playlist_view(self, library, shot_folder):
        library.load_directory(shot_folder)
        library.playlists.create("Best")

        assert library.toggle_in_active_playlist("shotB") is True
        assert [s.id for s in library.active_playlist_shots()] == ["shotB"]

    def test_sidebar_flag(self, library, state):
        library.set_sidebar_open(False)
        assert state.sidebar_open is False


class TestImportExport:
    """Tests for import and export through the Library."""

    def test_import_playlists_reports_missing(self, library, shot_folder):
        library.load_directory(shot_folder)

        summary = library.import_playlists(json.dumps({"Imported": ["shotA", "ghost"]}))

        assert summary.imported == 1
        assert summary.missing_shots == 1
        assert library.playlists.active == "Imported"

    def test_import_tags(self, library):
        assert library.import_tags('{"shotA": ["b", "a"]}') == 1
        assert library.tags.get("shotA") == ["a", "b"]

    @pytest.mark.parametrize("text", ["[]", "null", "not json"])
    def test_bad_imports_rejected(self, library, text):
        with pytest.raises(ImportFormatError):
            library.import_tags(text)
        with pytest.raises(ImportFormatError):
            library.import_playlists(text)
        assert len(library.tags) == 0
        assert len(library.playlists) == 0

    def test_exports(self, library):
        library.tags.add_tag("X", "red")
        library.tags.add_tag("X", "blue")
        library.tags.add_tag("Y", "green")
        library.playlists.create("Best")

        assert library.export_tags({"red"}).data == {"X": ["blue", "red"]}
        assert library.export_playlists(["Best"]).data == {"Best": []}


class TestFromConfig:
    """Tests for Library.from_config()."""

    def test_builds_http_remotes(self, tmp_path):
        config = {
            "remote": {"base_url": "http://example.test/api/", "timeout": 3},
            "state_path": str(tmp_path / "state.json"),
        }

        with Library.from_config(config) as lib:
            assert lib.client.base_url == "http://example.test/api"
            assert lib.client.timeout == 3.0
            assert lib.state.path == tmp_path / "state.json"
            assert isinstance(lib.state, LocalState)
