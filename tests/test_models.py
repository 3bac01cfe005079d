"""
Tests for models and state modules.
"""

import pytest


class TestFormatDuration:
    """Tests for format_duration helper."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "0s"),
            (4, "4s"),
            (20.0, "20s"),
            (83.456, "1m23.456s"),
            (3700.5, "1h1m40.5s"),
            (119.9996, "2m0s"),
            (59.9999, "1m0s"),
            (-3, "0s"),
        ],
    )
    def test_format(self, seconds, expected):
        from buildtrigger.models.build import format_duration
        assert format_duration(seconds) == expected


class TestBuildRecord:
    """Tests for BuildRecord dataclass."""

    def test_new_record_is_pending(self):
        from buildtrigger.models.build import BuildRecord

        build = BuildRecord(id="101", start=5.0)

        assert build.done is False
        assert build.status is None
        assert build.finished is None
        assert build.elapsed is None

    def test_mark_done(self):
        from buildtrigger.models.build import BuildRecord

        build = BuildRecord(id="101", start=5.0)
        build.mark_done("failed", 35.0)

        assert build.done is True
        assert build.status == "failed"
        assert build.elapsed == 30.0

    def test_terminal_statuses(self):
        from buildtrigger.models.build import TERMINAL_STATUSES
        assert TERMINAL_STATUSES == {"success", "failed", "canceled"}


class TestTriggerOptions:
    """Tests for TriggerOptions validation."""

    def _options(self, **overrides):
        from buildtrigger.models.options import TriggerOptions

        values = {
            "ref": "main",
            "token": "trig",
            "url": "http://gitlab/api/v4/projects/1/trigger/pipeline",
            "private_token": "glpat",
        }
        values.update(overrides)
        return TriggerOptions(**values)

    def test_valid_options(self):
        self._options().validate()

    @pytest.mark.parametrize(
        "field, message",
        [
            ("ref", "No ref/branch provided."),
            ("token", "No trigger token provided."),
            ("url", "No target url."),
            ("private_token", "No user private token provided."),
        ],
    )
    def test_missing_required(self, field, message):
        from buildtrigger.core.exceptions import ValidationError

        with pytest.raises(ValidationError, match=message):
            self._options(**{field: ""}).validate()

    def test_private_token_optional_without_wait(self):
        self._options(private_token="", wait=False).validate()

    def test_tag_requires_version(self):
        from buildtrigger.core.exceptions import ValidationError

        with pytest.raises(ValidationError, match="No version provided."):
            self._options(tag=True).validate()

    @pytest.mark.parametrize("version", ["1.2.3", "a.b.c.d", "1.2.3.4.5", "1.2.3.4\n", " 1.2.3.4"])
    def test_tag_rejects_bad_version(self, version):
        from buildtrigger.core.exceptions import ValidationError

        with pytest.raises(ValidationError, match="Invalid version format"):
            self._options(tag=True, version=version).validate()

    def test_tag_accepts_four_part_version(self):
        self._options(tag=True, version="10.0.12.345").validate()

    def test_form_data_without_tag(self):
        """Untagged builds send exactly ref and token."""
        data = self._options(version="1.2.3.4").form_data()
        assert data == {"ref": "main", "token": "trig"}

    def test_form_data_with_tag(self):
        data = self._options(tag=True, version="1.2.3.4").form_data()
        assert data == {
            "ref": "main",
            "token": "trig",
            "variables[FULL_VERSION]": "1.2.3.4",
        }


class TestPollPolicy:
    """Tests for PollPolicy."""

    def test_constant_delay_by_default(self):
        from buildtrigger.models.policy import PollPolicy

        policy = PollPolicy()
        assert [policy.discovery_wait(i) for i in (1, 2, 3)] == [2.0, 2.0, 2.0]

    def test_custom_backoff(self):
        from buildtrigger.models.policy import PollPolicy

        policy = PollPolicy(backoff=lambda attempt: 2.0 ** attempt)
        assert policy.discovery_wait(3) == 8.0


class TestBuildsStore:
    """Tests for BuildsStore class."""

    def test_add_and_get(self):
        from buildtrigger.state.builds import BuildsStore
        from buildtrigger.models.build import BuildRecord

        store = BuildsStore()
        build = BuildRecord(id="101", start=0.0)
        store.add(build)

        assert "101" in store
        assert store.get("101") is build
        assert store.get("999") is None
        assert len(store) == 1

    def test_add_same_id_replaces(self):
        from buildtrigger.state.builds import BuildsStore
        from buildtrigger.models.build import BuildRecord

        store = BuildsStore()
        store.add(BuildRecord(id="7", start=1.0))
        store.add(BuildRecord(id="7", start=2.0))

        assert len(store) == 1
        assert store.get("7").start == 2.0

    def test_ids_sorted_numerically(self):
        from buildtrigger.state.builds import BuildsStore
        from buildtrigger.models.build import BuildRecord

        store = BuildsStore()
        for build_id in ("101", "99", "1000"):
            store.add(BuildRecord(id=build_id, start=0.0))

        assert store.get_all_ids() == ["99", "101", "1000"]

    def test_pending_and_all_done(self):
        from buildtrigger.state.builds import BuildsStore
        from buildtrigger.models.build import BuildRecord

        store = BuildsStore()
        first = BuildRecord(id="1", start=0.0)
        second = BuildRecord(id="2", start=0.0)
        store.add(first)
        store.add(second)

        first.mark_done("success", 1.0)
        assert store.pending() == [second]
        assert store.all_done is False

        second.mark_done("canceled", 2.0)
        assert store.pending() == []
        assert store.all_done is True
