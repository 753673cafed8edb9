"""
Unit tests for VersionSetManager: generate, remove with renumbering, clear.
"""

import random
import string

import pytest

from exam_toolkit.core.models import ShuffleMode
from exam_toolkit.versioning import VersionSetManager


@pytest.fixture
def manager():
    return VersionSetManager(rng=random.Random(42))


def _codes(manager):
    return [v.code for v in manager.versions]


class TestGenerate:
    """Tests for VersionSetManager.generate."""

    def test_generate_when_three_both_then_codes_a_to_c(self, manager, mixed_bank):
        """Two-question example: every version keeps "4" at the correct index."""
        manager.generate(mixed_bank, 3, ShuffleMode.BOTH)
        assert _codes(manager) == ["A", "B", "C"]
        for version in manager.versions:
            assert sorted(q.id for q in version) == ["q1", "q2"]
            mc = next(q for q in version if q.id == "q1")
            assert sorted(mc.options) == ["2", "4", "6", "8"]
            assert mc.options[mc.correct_option] == "4"

    def test_generate_when_26_options_only_then_a_to_z_in_bank_order(self, manager, objective_bank):
        manager.generate(objective_bank, 26, ShuffleMode.OPTIONS_ONLY)
        assert _codes(manager) == list(string.ascii_uppercase)
        for version in manager.versions:
            assert [q.id for q in version] == ["mc0", "mc1", "mc2", "mc3", "mc4"]

    def test_generate_when_called_twice_then_replaces_set(self, manager, mixed_bank):
        first = manager.generate(mixed_bank, 5, ShuffleMode.BOTH)
        second = manager.generate(mixed_bank, 2, ShuffleMode.BOTH)
        assert len(manager) == 2
        assert {v.id for v in first}.isdisjoint(v.id for v in second)

    def test_generate_when_ids_then_unique_within_call(self, manager, mixed_bank):
        manager.generate(mixed_bank, 26, ShuffleMode.BOTH)
        assert len({v.id for v in manager.versions}) == 26

    def test_generate_when_mode_string_then_accepted(self, manager, mixed_bank):
        manager.generate(mixed_bank, 1, "questions")
        assert _codes(manager) == ["A"]

    @pytest.mark.parametrize("count", [0, 27, -1])
    def test_generate_when_count_out_of_range_then_raises_error(self, manager, mixed_bank, count):
        with pytest.raises(ValueError, match="count must be 1-26"):
            manager.generate(mixed_bank, count, ShuffleMode.BOTH)

    def test_generate_when_count_invalid_then_previous_set_kept(self, manager, mixed_bank):
        manager.generate(mixed_bank, 2, ShuffleMode.BOTH)
        with pytest.raises(ValueError):
            manager.generate(mixed_bank, 30, ShuffleMode.BOTH)
        assert _codes(manager) == ["A", "B"]

    def test_generate_when_empty_bank_then_empty_versions(self, manager):
        manager.generate([], 2, ShuffleMode.BOTH)
        assert [len(v) for v in manager.versions] == [0, 0]

    def test_versions_when_returned_then_not_internal_list(self, manager, mixed_bank):
        manager.generate(mixed_bank, 2, ShuffleMode.BOTH)
        assert isinstance(manager.versions, tuple)

    def test_generate_when_no_rng_then_works_unseeded(self, mixed_bank):
        manager = VersionSetManager()
        manager.generate(mixed_bank, 4, ShuffleMode.BOTH)
        assert _codes(manager) == ["A", "B", "C", "D"]


class TestRemove:
    """Tests for VersionSetManager.remove."""

    @pytest.mark.parametrize("size", [1, 2, 5, 26])
    def test_remove_when_any_position_then_codes_dense(self, mixed_bank, size):
        """Removing any one version leaves codes A.. in position order."""
        for position in range(size):
            manager = VersionSetManager(rng=random.Random(position))
            manager.generate(mixed_bank, size, ShuffleMode.BOTH)
            target = manager.versions[position].id
            assert manager.remove(target) is True
            assert _codes(manager) == list(string.ascii_uppercase[: size - 1])

    def test_remove_when_middle_then_other_questions_untouched(self, manager, objective_bank):
        """Only the code is recomputed; permutations of survivors stay exactly."""
        manager.generate(objective_bank, 4, ShuffleMode.BOTH)
        before = {v.id: v.questions for v in manager.versions}
        removed_id = manager.versions[1].id

        manager.remove(removed_id)

        for version in manager.versions:
            assert version.questions == before[version.id]
            assert version.questions is before[version.id]
        assert removed_id not in {v.id for v in manager.versions}

    def test_remove_when_first_then_former_b_becomes_a(self, manager, mixed_bank):
        manager.generate(mixed_bank, 3, ShuffleMode.BOTH)
        old_b = manager.versions[1]
        manager.remove(manager.versions[0].id)
        assert manager.versions[0].id == old_b.id
        assert manager.versions[0].code == "A"

    def test_remove_when_unknown_id_then_false_and_unchanged(self, manager, mixed_bank):
        manager.generate(mixed_bank, 3, ShuffleMode.BOTH)
        before = manager.versions
        assert manager.remove("missing") is False
        assert manager.versions == before

    def test_remove_when_last_version_then_empty(self, manager, mixed_bank):
        manager.generate(mixed_bank, 1, ShuffleMode.BOTH)
        manager.remove(manager.versions[0].id)
        assert len(manager) == 0

    def test_get_when_id_known_then_returns_version(self, manager, mixed_bank):
        manager.generate(mixed_bank, 2, ShuffleMode.BOTH)
        target = manager.versions[1]
        assert manager.get(target.id) is target
        assert manager.get("missing") is None


class TestClear:
    """Tests for VersionSetManager.clear."""

    def test_clear_when_populated_then_empty(self, manager, mixed_bank):
        manager.generate(mixed_bank, 3, ShuffleMode.BOTH)
        manager.clear()
        assert manager.versions == ()
        assert list(manager) == []

    def test_clear_when_already_empty_then_noop(self, manager):
        manager.clear()
        assert len(manager) == 0

    def test_generate_after_clear_then_codes_restart(self, manager, mixed_bank):
        manager.generate(mixed_bank, 3, ShuffleMode.BOTH)
        manager.clear()
        manager.generate(mixed_bank, 2, ShuffleMode.BOTH)
        assert _codes(manager) == ["A", "B"]
