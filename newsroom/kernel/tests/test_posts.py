"""
Post Repository Tests

Create/update/delete contracts, the draft/published partition and view
aggregation. Rejections return StoreResult(ok=False) and never mutate state.
"""

import pytest

from newsroom.kernel.posts import PostRepository, PostStorage
from newsroom.kernel.tests.conftest import make_fields
from newsroom.kernel.types import NOT_FOUND, VALIDATION_ERROR, Post


def assert_partitioned(repo):
    drafts = {p.id for p in repo.filter_by_status("draft")}
    published = {p.id for p in repo.filter_by_status("published")}
    everything = {p.id for p in repo.list()}
    assert drafts | published == everything
    assert not drafts & published


# ============================================================================
# create
# ============================================================================


class TestCreate:
    def test_assigns_id_and_zero_views(self, repo, post_fields):
        r = repo.create(post_fields)
        assert r.ok
        post = r.value
        assert post.id
        assert post.views == "0"

    def test_keeps_all_input_fields(self, repo, post_fields):
        post = repo.create(post_fields).value
        for name, value in post_fields.items():
            assert getattr(post, name) == value

    def test_ids_are_unique(self, repo, post_fields):
        ids = {repo.create(post_fields).value.id for _ in range(20)}
        assert len(ids) == 20

    def test_preserves_insertion_order(self, repo):
        for title in ["first", "second", "third"]:
            repo.create(make_fields(title=title))
        assert [p.title for p in repo.list()] == ["first", "second", "third"]

    def test_collapses_duplicate_tags_in_order(self, repo):
        post = repo.create(make_fields(tags=["b", "a", "b"])).value
        assert post.tags == ["b", "a"]

    def test_status_defaults_to_draft(self, repo):
        fields = make_fields()
        del fields["status"]
        assert repo.create(fields).value.status == "draft"

    @pytest.mark.parametrize(
        "fields",
        [
            make_fields(id="mine"),
            make_fields(views="10K"),
            make_fields(title="   "),
            make_fields(status="archived"),
            make_fields(date="January 1st"),
            make_fields(tags="x"),
            make_fields(colour="red"),
        ],
    )
    def test_rejects_malformed_fields(self, repo, fields):
        r = repo.create(fields)
        assert not r.ok
        assert r.error.kind == VALIDATION_ERROR
        assert repo.list() == []

    def test_rejects_missing_title(self, repo):
        fields = make_fields()
        del fields["title"]
        r = repo.create(fields)
        assert r.error.kind == VALIDATION_ERROR


# ============================================================================
# update
# ============================================================================


class TestUpdate:
    def test_changes_only_given_fields(self, repo, post_fields):
        before = repo.create(post_fields).value
        r = repo.update(before.id, {"status": "published"})
        assert r.ok
        after = r.value
        assert after.status == "published"
        before.status = "published"
        assert after == before

    def test_update_is_visible_in_listing(self, repo, post_fields):
        post = repo.create(post_fields).value
        repo.update(post.id, {"title": "Renamed", "tags": ["y", "z"]})
        listed = repo.get(post.id).value
        assert listed.title == "Renamed"
        assert listed.tags == ["y", "z"]

    def test_unknown_id_is_not_found(self, repo):
        r = repo.update("nope", {"title": "x"})
        assert not r.ok
        assert r.error.kind == NOT_FOUND

    @pytest.mark.parametrize("partial", [{"id": "other"}, {"views": "9K"}, {"status": "hidden"}])
    def test_rejects_protected_or_invalid_fields(self, repo, post_fields, partial):
        post = repo.create(post_fields).value
        r = repo.update(post.id, partial)
        assert r.error.kind == VALIDATION_ERROR
        assert repo.get(post.id).value == post

    def test_invalid_field_blocks_whole_merge(self, repo, post_fields):
        post = repo.create(post_fields).value
        r = repo.update(post.id, {"title": "New", "status": "bogus"})
        assert not r.ok
        assert repo.get(post.id).value.title == "Hello"


# ============================================================================
# delete / get
# ============================================================================


class TestDelete:
    def test_delete_removes_post(self, repo, post_fields):
        post = repo.create(post_fields).value
        assert repo.delete(post.id).ok
        assert post.id not in {p.id for p in repo.list()}

    def test_second_delete_is_not_found(self, repo, post_fields):
        post = repo.create(post_fields).value
        repo.delete(post.id)
        r = repo.delete(post.id)
        assert not r.ok
        assert r.error.kind == NOT_FOUND

    def test_get_missing_is_not_found(self, repo):
        assert repo.get("missing").error.kind == NOT_FOUND


class TestSnapshots:
    def test_list_returns_copies(self, repo, post_fields):
        repo.create(post_fields)
        repo.list()[0].title = "mutated"
        assert repo.list()[0].title == "Hello"

    def test_empty_repository_lists_nothing(self, repo):
        assert repo.list() == []
        assert repo.filter_by_status("draft") == []


# ============================================================================
# status partition
# ============================================================================


class TestPartition:
    def test_holds_across_mixed_operations(self, repo):
        ids = [repo.create(make_fields(title=f"p{i}", status="draft")).value.id for i in range(5)]
        assert_partitioned(repo)
        repo.update(ids[0], {"status": "published"})
        repo.update(ids[3], {"status": "published"})
        assert_partitioned(repo)
        repo.delete(ids[3])
        repo.update(ids[1], {"title": "retitled"})
        repo.create(make_fields(status="published"))
        assert_partitioned(repo)
        assert len(repo.filter_by_status("published")) == 2
        assert len(repo.filter_by_status("draft")) == 3

    def test_unknown_status_matches_nothing(self, repo, post_fields):
        repo.create(post_fields)
        assert repo.filter_by_status("archived") == []


# ============================================================================
# views
# ============================================================================


class TestViews:
    def test_aggregate_parses_thousands_suffix(self, repo):
        repo.load([
            Post(id="a", title="A", views="1.5K"),
            Post(id="b", title="B", views="250"),
        ])
        assert repo.aggregate_views() == 1750

    def test_new_posts_count_as_zero(self, repo, post_fields):
        repo.create(post_fields)
        assert repo.aggregate_views() == 0

    def test_load_rejects_bad_view_count(self, repo):
        r = repo.load([Post(id="a", title="A", views="lots")])
        assert r.error.kind == VALIDATION_ERROR
        assert repo.list() == []

    def test_load_keeps_ids(self, repo):
        repo.load([Post(id="kept", title="A", views="3K")])
        assert repo.get("kept").value.views == "3K"


class TestStorageInterface:
    def test_repository_uses_injected_storage(self, post_fields):
        class RecordingStorage(PostStorage):
            def __init__(self):
                self.rows = {}
                self.puts = 0

            def get(self, post_id):
                return self.rows.get(post_id)

            def put(self, post):
                self.puts += 1
                self.rows[post.id] = post

            def delete(self, post_id):
                self.rows.pop(post_id, None)

            def values(self):
                return list(self.rows.values())

        storage = RecordingStorage()
        repo = PostRepository(storage)
        post = repo.create(post_fields).value
        repo.update(post.id, {"status": "published"})
        assert storage.puts == 2
        assert storage.rows[post.id].status == "published"
