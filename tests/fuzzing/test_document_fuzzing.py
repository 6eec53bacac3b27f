"""
Hypothesis fuzzing for the Document lifecycle.

Fuzzes:
- Arbitrary text (any string is accepted)
- Arbitrary sequences of add_text / request_review / reject / approve
- Review policies with different initial approval counters

Properties:
- Content is empty unless the document is published.
- Once published, content equals the raw buffer and never changes.
- The buffer only grows, and only while in draft.
- Every observed status change is in ALLOWED_TRANSITIONS.
- The state is always one of the three variants.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from editorial_kernel.domain import (
    Document,
    DocumentStatus,
    Draft,
    PendingReview,
    Published,
    ReviewPolicy,
    validate_transition,
)

texts = st.text(max_size=40)

operations = st.one_of(
    st.tuples(st.just("add_text"), texts),
    st.tuples(st.sampled_from(["request_review", "reject", "approve"]), st.none()),
)

policies = st.builds(
    ReviewPolicy,
    policy_name=st.just("fuzz_review"),
    version=st.just(1),
    initial_approvals_remaining=st.integers(min_value=0, max_value=4),
)


class TestVisibilityProperties:

    @given(text=texts)
    def test_draft_never_shows_content(self, text):
        document = Document.new()
        document.add_text(text)
        assert document.content() == ""

    @given(text=texts)
    def test_pending_never_shows_content(self, text):
        document = Document.new()
        document.add_text(text)
        document.request_review()
        assert document.content() == ""

    @given(text=texts)
    def test_two_approvals_publish_text(self, text):
        document = Document.new()
        document.add_text(text)
        document.request_review()
        document.approve()
        document.approve()
        assert document.content() == text

    @given(first=texts, second=texts, blocked=texts)
    def test_reject_reopens_draft(self, first, second, blocked):
        document = Document.new()
        document.add_text(first)
        document.request_review()
        document.add_text(blocked)
        document.reject()
        document.add_text(second)
        document.request_review()
        document.approve()
        document.approve()
        assert document.content() == first + second

    @given(text=texts, late=texts)
    def test_published_is_sticky(self, text, late):
        document = Document.new()
        document.add_text(text)
        document.request_review()
        document.approve()
        document.approve()
        document.request_review()
        document.reject()
        document.add_text(late)
        assert document.content() == text


class TestRandomSequences:

    @settings(max_examples=200)
    @given(policy=policies, ops=st.lists(operations, max_size=30))
    def test_lifecycle_invariants(self, policy, ops):
        document = Document.new(policy=policy)
        published_text: str | None = None

        for name, arg in ops:
            before_state = document.state
            before_text = document.raw_text

            if name == "add_text":
                document.add_text(arg)
            else:
                getattr(document, name)()

            state = document.state
            assert isinstance(state, (Draft, PendingReview, Published))
            assert validate_transition(before_state.status, state.status)

            if name == "add_text":
                if isinstance(before_state, Draft):
                    assert document.raw_text == before_text + arg
                else:
                    assert document.raw_text == before_text
            else:
                assert document.raw_text == before_text

            if document.status is DocumentStatus.PUBLISHED:
                if published_text is None:
                    published_text = document.raw_text
                assert document.content() == published_text
            else:
                assert published_text is None
                assert document.content() == ""

    @given(policy=policies)
    def test_policy_approvals_to_publish(self, policy):
        document = Document.new(policy=policy)
        document.add_text("x")
        document.request_review()
        for _ in range(policy.approvals_to_publish - 1):
            document.approve()
            assert document.status is DocumentStatus.PENDING_REVIEW
        document.approve()
        assert document.status is DocumentStatus.PUBLISHED
