"""
Tests for the conversation pair log.
"""
from chatlearn.services.conversations import ConversationLog
from chatlearn.services.records import ConversationPair


class TestConversationLog:
    """Test suite for ConversationLog."""

    def test_append_keeps_insertion_order(self):
        """Test pairs are kept in the order they arrive."""
        log = ConversationLog()
        log.append("hi", "hello", 1)
        log.append("how are you", "fine", 2)

        assert [p.reply for p in log] == ["hello", "fine"]
        assert len(log) == 2

    def test_append_returns_record(self):
        """Test append returns the stored pair."""
        pair = ConversationLog().append("a", "b", 3)

        assert pair == ConversationPair(original="a", reply="b", timestamp=3)

    def test_replies_to(self):
        """Test replies are looked up by exact original text."""
        log = ConversationLog()
        log.append("hi", "hello", 1)
        log.append("Hi", "yo", 2)
        log.append("hi", "hey", 3)

        assert log.replies_to("hi") == ["hello", "hey"]
        assert log.replies_to("nothing") == []

    def test_remove_if(self):
        """Test predicate removal reports how many pairs went."""
        log = ConversationLog([
            ConversationPair(original="a", reply="b", timestamp=1),
            ConversationPair(original="c", reply="d", timestamp=2),
        ])

        assert log.remove_if(lambda p: p.original == "a") == 1
        assert [p.original for p in log] == ["c"]

    def test_to_list_is_a_copy(self):
        """Test the returned list does not alias the log."""
        log = ConversationLog()
        log.append("a", "b", 1)
        log.to_list().clear()

        assert len(log) == 1
