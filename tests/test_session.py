"""Tests for the comparison session."""

from __future__ import annotations

from jsoneditor.core.documents import Document
from jsoneditor.core.session import ComparisonSession


def make_docs(count: int) -> list[Document]:
    """Create distinct JSON documents."""
    return [Document(title=f"doc{i}.json", text="{}") for i in range(count)]


class TestAdopt:
    """Tests for ComparisonSession.adopt method."""

    def test_fills_both_slots_in_order(self):
        """The first two candidates become left and right."""
        a, b, c = make_docs(3)
        session = ComparisonSession()
        session.adopt([a, b, c])

        assert session.left is a
        assert session.right is b
        assert session.is_complete

    def test_single_candidate(self):
        """One candidate fills only the left slot."""
        (a,) = make_docs(1)
        session = ComparisonSession()
        session.adopt([a])

        assert session.left is a
        assert session.right is None
        assert not session.is_complete

    def test_existing_slots_not_overwritten(self):
        """Filled slots keep their documents."""
        a, b, c, d = make_docs(4)
        session = ComparisonSession()
        session.adopt([a, b])
        session.adopt([c, d])

        assert session.left is a
        assert session.right is b

    def test_same_document_never_fills_both(self):
        """A document already on the left cannot become right."""
        (a,) = make_docs(1)
        session = ComparisonSession()
        session.adopt([a, a])

        assert session.left is a
        assert session.right is None

    def test_right_not_moved_to_left(self):
        """The current right document is skipped when filling left."""
        a, b = make_docs(2)
        session = ComparisonSession()
        session.right = a
        session.adopt([a, b])

        assert session.left is b
        assert session.right is a

    def test_identity_not_content(self):
        """Documents with equal text are still distinct."""
        a = Document(title="x", text='{"k": 1}')
        b = Document(title="x", text='{"k": 1}')
        session = ComparisonSession()
        session.adopt([a, b])

        assert session.left is a
        assert session.right is b


class TestAssign:
    """Tests for ComparisonSession.assign method."""

    def test_fills_first_empty_slot(self):
        """assign() fills left, then right."""
        a, b = make_docs(2)
        session = ComparisonSession()
        session.assign(a)
        session.assign(b)

        assert session.documents == [a, b]

    def test_ignores_duplicate(self):
        """The left document is not assigned twice."""
        (a,) = make_docs(1)
        session = ComparisonSession()
        session.assign(a)
        session.assign(a)

        assert session.right is None


class TestVisibilityChange:
    """Tests for ComparisonSession.on_visibility_change method."""

    def test_all_visible_no_change(self):
        """Nothing is dropped while both documents are visible."""
        a, b, c = make_docs(3)
        session = ComparisonSession()
        session.adopt([a, b])

        assert session.on_visibility_change([c, b, a]) == []
        assert session.documents == [a, b]

    def test_left_hidden_promotes_right(self):
        """Losing left promotes right and empties the right slot."""
        a, b = make_docs(2)
        session = ComparisonSession()
        session.adopt([a, b])

        assert session.on_visibility_change([b]) == [a]
        assert session.left is b
        assert session.right is None

    def test_right_hidden_clears_right(self):
        """Losing right only empties the right slot."""
        a, b = make_docs(2)
        session = ComparisonSession()
        session.adopt([a, b])

        assert session.on_visibility_change([a]) == [b]
        assert session.left is a
        assert session.right is None

    def test_one_transition_per_event(self):
        """Both hidden at once takes two events to empty the session."""
        a, b = make_docs(2)
        session = ComparisonSession()
        session.adopt([a, b])

        assert session.on_visibility_change([]) == [a]
        assert session.left is b
        assert session.right is None

        assert session.on_visibility_change([]) == [b]
        assert session.left is None
        assert session.right is None

    def test_empty_session(self):
        """An empty session has nothing to drop."""
        session = ComparisonSession()
        assert session.on_visibility_change([]) == []

    def test_tracks(self):
        """tracks() checks identity against both slots."""
        a, b, c = make_docs(3)
        session = ComparisonSession()
        session.adopt([a, b])

        assert session.tracks(a)
        assert session.tracks(b)
        assert not session.tracks(c)
