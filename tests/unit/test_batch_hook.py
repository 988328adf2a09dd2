"""
Unit tests for the batch load hook and its use by transaction streams.
"""

from unittest.mock import Mock

import pytest

from cex_api_kit.core.batch_hook import BatchLoadHook
from cex_api_kit.core.transactions import TransactionStream

from ..fixtures.transaction_data import history_response, make_page, make_transaction
from ..mocks.api_mocks import ScriptedTransactionSource, SimulatedHistorySource


class TestBatchLoadHook:
    """Test cases for BatchLoadHook on its own."""

    def test_notify_without_transforms(self):
        """Test the batch is returned untouched when nothing is attached."""
        hook = BatchLoadHook()
        hook.batch = [{"id": "1"}]
        assert hook.notify() == [{"id": "1"}]

    def test_transform_replaces_batch(self):
        """Test a returned sequence replaces the batch."""
        hook = BatchLoadHook()
        hook.attach(lambda batch: [tx for tx in batch if tx["id"] != "2"])
        hook.batch = [{"id": "1"}, {"id": "2"}, {"id": "3"}]

        assert hook.notify() == [{"id": "1"}, {"id": "3"}]
        assert hook.batch == [{"id": "1"}, {"id": "3"}]

    def test_transform_returning_none_keeps_batch(self):
        """Test returning None keeps in-place changes."""
        hook = BatchLoadHook()

        @hook.attach
        def tag(batch):
            batch.append({"id": "injected"})

        hook.batch = [{"id": "1"}]
        assert hook.notify() == [{"id": "1"}, {"id": "injected"}]

    def test_transforms_run_in_attachment_order(self):
        """Test each transform sees the batch left by the previous one."""
        hook = BatchLoadHook()
        calls = []

        def first(batch):
            calls.append(("first", list(batch)))
            return batch + [{"id": "a"}]

        def second(batch):
            calls.append(("second", list(batch)))
            return batch + [{"id": "b"}]

        hook.attach(first)
        hook.attach(second)
        hook.batch = []

        assert hook.notify() == [{"id": "a"}, {"id": "b"}]
        assert calls == [("first", []), ("second", [{"id": "a"}])]

    def test_attach_is_idempotent(self):
        """Test attaching the same transform twice registers it once."""
        hook = BatchLoadHook()
        transform = Mock(return_value=None)
        hook.attach(transform)
        hook.attach(transform)
        hook.batch = []
        hook.notify()

        assert len(hook) == 1
        transform.assert_called_once_with([])

    def test_detach(self):
        """Test detached transforms are no longer called."""
        hook = BatchLoadHook()
        transform = Mock(return_value=None)
        hook.attach(transform)
        hook.detach(transform)
        hook.notify()

        assert transform not in hook
        transform.assert_not_called()

    def test_detach_unknown_transform(self):
        """Test detaching an unregistered transform is a no-op."""
        hook = BatchLoadHook()
        hook.detach(Mock())
        assert len(hook) == 0

    def test_transform_exception_propagates(self):
        """Test transform errors are not swallowed."""
        hook = BatchLoadHook()
        hook.attach(Mock(side_effect=RuntimeError("enrichment failed")))

        with pytest.raises(RuntimeError, match="enrichment failed"):
            hook.notify()


class TestStreamHooks:
    """Test cases for page transforms attached to a stream."""

    def test_hook_sees_full_oldest_first_page(self):
        """Test transforms receive the whole page in ascending order."""
        source = ScriptedTransactionSource([history_response(make_page([1, 2, 3]), prev=False)])
        stream = TransactionStream(source)
        transform = Mock(return_value=None)
        stream.batch_hook.attach(transform)

        list(stream)

        batch = transform.call_args_list[0].args[0]
        assert [tx["id"] for tx in batch] == ["1", "2", "3"]

    def test_hook_called_once_per_loaded_page(self, history_source):
        """Test transforms run for every fetched page."""
        stream = TransactionStream(history_source, limit=10)
        transform = Mock(return_value=None)
        stream.batch_hook.attach(transform)

        list(stream)

        assert transform.call_count == history_source.call_count == 3

    def test_removed_record_never_reaches_caller(self, history_source):
        """Test a record dropped by a transform is not yielded."""
        stream = TransactionStream(history_source, limit=10)
        stream.batch_hook.attach(lambda batch: [tx for tx in batch if tx["id"] != "105"])

        yielded = [tx["id"] for tx in stream]
        assert "105" not in yielded
        assert len(yielded) == 24

    def test_dropping_page_tail_keeps_cursor(self, history_source):
        """Test dropping the newest record of a page does not move the cursor back."""
        stream = TransactionStream(history_source, limit=10)
        stream.batch_hook.attach(lambda batch: [tx for tx in batch if tx["id"] != "110"])

        yielded = [int(tx["id"]) for tx in stream]

        assert yielded == [i for i in range(101, 126) if i != 110]
        assert history_source.call_history[1]["txid"] == "110"

    def test_dropping_whole_page_continues_stream(self, history_source):
        """Test a page emptied by a transform does not end the stream."""
        stream = TransactionStream(history_source, limit=10)
        stream.batch_hook.attach(
            lambda batch: [tx for tx in batch if not 101 <= int(tx["id"]) <= 110]
        )

        assert [int(tx["id"]) for tx in stream] == list(range(111, 126))

    def test_injected_records_are_visible(self):
        """Test a transform can add records to a page."""
        source = ScriptedTransactionSource([history_response(make_page([1]), prev=False)])
        stream = TransactionStream(source)
        stream.batch_hook.attach(lambda batch: batch + [make_transaction(2, "sell")])

        assert [tx["id"] for tx in stream] == ["1", "2"]

    def test_hook_failure_fails_stream(self, sample_transactions):
        """Test a raising transform surfaces as a stream failure and leaves it unstarted."""
        source = SimulatedHistorySource(sample_transactions)
        stream = TransactionStream(source, limit=10)
        stream.batch_hook.attach(Mock(side_effect=ValueError("bad page")))

        with pytest.raises(ValueError, match="bad page"):
            stream.rewind()
        with pytest.raises(ValueError, match="bad page"):
            stream.valid()

        assert source.call_count == 2
        assert source.call_history[1]["txid"] == "1"
