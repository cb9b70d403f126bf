"""
Tests for bulk sequence updates (app.crud.sequence).

Tests:
- Entry normalization (id / sequence coercion, blanks, duplicates)
- Empty batches never touch the database
- Batch persistence, idempotence and order independence
- All-or-nothing behaviour when one row fails
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import CheckConstraint, Column, Integer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import declarative_base

from app.crud.sequence import (
    SequenceAssignment,
    apply_sequence_updates,
    normalize_sequence_entries,
)
from app.models.subscription_plan import EmployeeSubscriptionPlan, PlanBenefit, SubscriptionType
from app.schemas.common import SequenceEntry


RankedBase = declarative_base()


class RankedItem(RankedBase):
    """Sequenced table whose CHECK constraint lets a test force a mid-batch failure"""
    __tablename__ = "ranked_items"
    __table_args__ = (CheckConstraint("sequence IS NULL OR sequence >= 0", name="ck_ranked_items_sequence"),)

    id = Column(Integer, primary_key=True)
    sequence = Column(Integer, nullable=True)


@pytest.fixture
def ranked_items(db_session, test_engine):
    RankedBase.metadata.create_all(bind=test_engine)
    items = [RankedItem(id=i, sequence=i) for i in (1, 2, 3)]
    db_session.add_all(items)
    db_session.commit()
    yield items
    db_session.close()
    RankedBase.metadata.drop_all(bind=test_engine)


@pytest.fixture
def benefits(seed):
    return seed(
        PlanBenefit,
        dict(subscription_type=SubscriptionType.EMPLOYEE, plan_id=1, benefit_english="Unlimited job alerts", sequence=3),
        dict(subscription_type=SubscriptionType.EMPLOYEE, plan_id=1, benefit_english="Profile boost", sequence=1),
        dict(subscription_type=SubscriptionType.EMPLOYEE, plan_id=1, benefit_english="Priority support", sequence=2),
    )


def sequences(db_session, model):
    return {obj.id: obj.sequence for obj in db_session.query(model).all()}


class TestNormalizeEntries:
    """Tests for normalize_sequence_entries"""

    def test_none_and_empty(self):
        """Test missing batch normalizes to nothing"""
        assert normalize_sequence_entries(None) == []
        assert normalize_sequence_entries([]) == []

    def test_numeric_strings_are_coerced(self):
        """Test ids and sequences sent as strings"""
        result = normalize_sequence_entries([{"id": "7", "sequence": " 3 "}, {"id": "8.0", "sequence": "4.0"}])
        assert result == [SequenceAssignment(7, 3), SequenceAssignment(8, 4)]

    @pytest.mark.parametrize("bad_id", [None, "", "abc", True, False, 2.5, "2.5", [1], {"id": 1}])
    def test_unusable_ids_are_dropped(self, bad_id):
        """Test entries without an integer id are skipped silently"""
        assert normalize_sequence_entries([{"id": bad_id, "sequence": 1}]) == []

    def test_missing_id_is_dropped(self):
        """Test entry without an id key"""
        assert normalize_sequence_entries([{"sequence": 1}, {"id": 5, "sequence": 2}]) == [SequenceAssignment(5, 2)]

    def test_integral_float_id(self):
        """Test 4.0 is accepted as id 4"""
        assert normalize_sequence_entries([{"id": 4.0, "sequence": 1}]) == [SequenceAssignment(4, 1)]

    @pytest.mark.parametrize("raw_sequence", ["", None, "abc", 1.5, "1.5", True])
    def test_unusable_sequences_clear_position(self, raw_sequence):
        """Test blank or non-integer sequence becomes NULL"""
        assert normalize_sequence_entries([{"id": 5, "sequence": raw_sequence}]) == [SequenceAssignment(5, None)]

    def test_missing_sequence_clears_position(self):
        """Test entry without a sequence key"""
        assert normalize_sequence_entries([{"id": 5}]) == [SequenceAssignment(5, None)]

    def test_zero_sequence_is_kept(self):
        """Test 0 is a real position, not a blank"""
        assert normalize_sequence_entries([{"id": 5, "sequence": 0}]) == [SequenceAssignment(5, 0)]
        assert normalize_sequence_entries([{"id": 5, "sequence": "0"}]) == [SequenceAssignment(5, 0)]

    def test_duplicate_ids_keep_last_occurrence(self):
        """Test a repeated id takes its last value and last position"""
        result = normalize_sequence_entries([
            {"id": 1, "sequence": 5},
            {"id": 2, "sequence": 6},
            {"id": 1, "sequence": 2},
        ])
        assert result == [SequenceAssignment(2, 6), SequenceAssignment(1, 2)]

    def test_accepts_schema_objects(self):
        """Test validated SequenceEntry models are read like dicts"""
        entries = [SequenceEntry(id="3", sequence=9), SequenceEntry(sequence=1)]
        assert normalize_sequence_entries(entries) == [SequenceAssignment(3, 9)]


class TestEmptyBatch:
    """Tests for batches with nothing usable in them"""

    @pytest.mark.parametrize("entries", [None, [], [{"id": "abc", "sequence": 1}], [{"sequence": 2}]])
    def test_no_database_calls(self, entries):
        """Test empty normalized batch returns 0 without touching the session"""
        db = MagicMock()

        assert apply_sequence_updates(db, PlanBenefit, entries) == 0
        db.execute.assert_not_called()
        db.commit.assert_not_called()
        db.rollback.assert_not_called()


class TestApplySequenceUpdates:
    """Tests for apply_sequence_updates against a real session"""

    def test_updates_every_row(self, db_session, benefits):
        """Test each entry lands on its row"""
        a, b, c = benefits
        updated = apply_sequence_updates(db_session, PlanBenefit, [
            {"id": a.id, "sequence": 1},
            {"id": b.id, "sequence": 2},
            {"id": c.id, "sequence": 3},
        ])

        assert updated == 3
        assert sequences(db_session, PlanBenefit) == {a.id: 1, b.id: 2, c.id: 3}

    def test_clear_sequence(self, db_session, benefits):
        """Test "" sets the column to NULL"""
        a = benefits[0]
        assert apply_sequence_updates(db_session, PlanBenefit, [{"id": a.id, "sequence": ""}]) == 1
        assert sequences(db_session, PlanBenefit)[a.id] is None

    def test_malformed_entries_are_skipped(self, db_session, benefits):
        """Test bad ids are dropped while the rest of the batch applies"""
        a = benefits[0]
        updated = apply_sequence_updates(db_session, PlanBenefit, [
            {"id": "abc", "sequence": 1},
            {"id": a.id, "sequence": 10},
        ])

        assert updated == 1
        assert sequences(db_session, PlanBenefit)[a.id] == 10

    def test_duplicate_ids_count_once(self, db_session, benefits):
        """Test last occurrence wins and the count is of distinct ids"""
        a = benefits[0]
        updated = apply_sequence_updates(db_session, PlanBenefit, [
            {"id": a.id, "sequence": 5},
            {"id": a.id, "sequence": 2},
        ])

        assert updated == 1
        assert sequences(db_session, PlanBenefit)[a.id] == 2

    def test_unknown_id_counts_as_attempted(self, db_session, benefits):
        """Test an id with no row is not an error"""
        before = sequences(db_session, PlanBenefit)

        assert apply_sequence_updates(db_session, PlanBenefit, [{"id": 999, "sequence": 1}]) == 1
        assert sequences(db_session, PlanBenefit) == before

    def test_idempotent(self, db_session, benefits):
        """Test applying the same batch twice gives the same state"""
        a, b, c = benefits
        batch = [{"id": a.id, "sequence": 2}, {"id": b.id, "sequence": ""}, {"id": c.id, "sequence": 1}]

        apply_sequence_updates(db_session, PlanBenefit, batch)
        first = sequences(db_session, PlanBenefit)
        apply_sequence_updates(db_session, PlanBenefit, batch)

        assert sequences(db_session, PlanBenefit) == first

    def test_entry_order_does_not_matter(self, db_session, benefits):
        """Test a permuted batch (distinct ids) gives the same state"""
        a, b, c = benefits
        batch = [{"id": a.id, "sequence": 7}, {"id": b.id, "sequence": 8}, {"id": c.id, "sequence": 9}]

        apply_sequence_updates(db_session, PlanBenefit, batch)
        forward = sequences(db_session, PlanBenefit)
        apply_sequence_updates(db_session, PlanBenefit, [{"id": a.id, "sequence": 0}])
        apply_sequence_updates(db_session, PlanBenefit, list(reversed(batch)))

        assert sequences(db_session, PlanBenefit) == forward

    def test_soft_deleted_rows_are_updated(self, db_session, seed):
        """Test reordering ignores deleted_at and is_active"""
        from datetime import datetime, timezone

        deleted, inactive = seed(
            EmployeeSubscriptionPlan,
            dict(plan_name_english="Old", plan_validity_days=30, plan_price=0, contact_credits=0,
                 interest_credits=0, deleted_at=datetime.now(timezone.utc)),
            dict(plan_name_english="Hidden", plan_validity_days=30, plan_price=0, contact_credits=0,
                 interest_credits=0, is_active=False),
        )

        updated = apply_sequence_updates(db_session, EmployeeSubscriptionPlan, [
            {"id": deleted.id, "sequence": 4},
            {"id": inactive.id, "sequence": 5},
        ])

        assert updated == 2
        assert sequences(db_session, EmployeeSubscriptionPlan) == {deleted.id: 4, inactive.id: 5}

    def test_updated_at_untouched(self, db_session, benefits):
        """Test reordering does not count as an edit of the row"""
        a = benefits[0]
        assert a.updated_at is None

        apply_sequence_updates(db_session, PlanBenefit, [{"id": a.id, "sequence": 42}])

        row = db_session.get(PlanBenefit, a.id)
        assert row.sequence == 42
        assert row.updated_at is None


class TestAtomicity:
    """Tests that a failing batch leaves no partial writes"""

    def test_failure_rolls_back_whole_batch(self, db_session, ranked_items):
        """Test a constraint violation on the second row undoes the first"""
        with pytest.raises(IntegrityError):
            apply_sequence_updates(db_session, RankedItem, [
                {"id": 1, "sequence": 10},
                {"id": 2, "sequence": -1},
                {"id": 3, "sequence": 30},
            ])

        assert sequences(db_session, RankedItem) == {1: 1, 2: 2, 3: 3}

    def test_session_usable_after_failure(self, db_session, ranked_items):
        """Test the session was rolled back and accepts a new batch"""
        with pytest.raises(IntegrityError):
            apply_sequence_updates(db_session, RankedItem, [{"id": 1, "sequence": -5}])

        assert apply_sequence_updates(db_session, RankedItem, [{"id": 1, "sequence": 0}]) == 1
        assert sequences(db_session, RankedItem)[1] == 0

    def test_error_is_reraised_after_rollback(self):
        """Test the original exception propagates and rollback runs"""
        db = MagicMock()
        db.execute.side_effect = [None, RuntimeError("connection lost")]

        with pytest.raises(RuntimeError, match="connection lost"):
            apply_sequence_updates(db, PlanBenefit, [{"id": 1, "sequence": 1}, {"id": 2, "sequence": 2}])

        assert db.execute.call_count == 2
        db.rollback.assert_called_once()
        db.commit.assert_not_called()
