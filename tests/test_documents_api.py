"""Tests for the /api/documents endpoints."""

import uuid


def create(client, headers, **payload):
    response = client.post("/api/documents", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["document"]


class TestDocumentLifecycle:
    def test_create_update_delete_scenario(self, client, editor_headers):
        response = client.post("/api/documents", json={"title": "A", "content": "B"}, headers=editor_headers)
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Document created successfully"
        document = body["document"]
        assert document["version"] == 1
        assert document["createdAt"] == document["updatedAt"]
        assert document["author"]["username"] == "editor_user"
        assert document["author"]["email"] == "editor@example.com"

        response = client.put(f"/api/documents/{document['id']}", json={"content": "C"}, headers=editor_headers)
        assert response.status_code == 200
        updated = response.json()["document"]
        assert updated["version"] == 2
        assert updated["title"] == "A"
        assert updated["content"] == "C"
        assert updated["createdAt"] == document["createdAt"]
        assert response.headers["ETag"] == '"2"'

        response = client.delete(f"/api/documents/{document['id']}", headers=editor_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Document deleted successfully"}

        response = client.get(f"/api/documents/{document['id']}", headers=editor_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Document not found"}

    def test_get_single(self, client, editor_headers, viewer_headers, sample_document):
        document = create(client, editor_headers, **sample_document)

        response = client.get(f"/api/documents/{document['id']}", headers=viewer_headers)

        assert response.status_code == 200
        fetched = response.json()["document"]
        assert fetched == document
        assert response.headers["ETag"] == '"1"'

    def test_partial_update_leaves_absent_fields(self, client, admin_headers, sample_document):
        document = create(client, admin_headers, **sample_document)

        response = client.put(f"/api/documents/{document['id']}", json={"tags": ["Audio"]}, headers=admin_headers)

        updated = response.json()["document"]
        assert updated["tags"] == ["Audio"]
        for field in ("title", "content", "category", "author", "createdAt"):
            assert updated[field] == document[field]
        assert updated["version"] == document["version"] + 1

    def test_author_is_not_changed_by_other_editor(self, client, editor_headers, admin_headers, sample_document):
        document = create(client, editor_headers, **sample_document)

        response = client.put(f"/api/documents/{document['id']}", json={"title": "New"}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["document"]["author"]["username"] == "editor_user"

    def test_versions_increase_by_one(self, client, editor_headers, sample_document):
        document = create(client, editor_headers, **sample_document)
        for expected in (2, 3, 4):
            response = client.put(f"/api/documents/{document['id']}", json={}, headers=editor_headers)
            assert response.json()["document"]["version"] == expected


class TestDocumentValidation:
    def test_create_requires_title_and_content(self, client, editor_headers):
        response = client.post("/api/documents", json={"title": "  "}, headers=editor_headers)

        assert response.status_code == 400
        errors = {e["field"]: e["message"] for e in response.json()["errors"]}
        assert errors == {"title": "Title is required", "content": "Content is required"}

    def test_update_rejects_empty_title_without_mutating(self, client, editor_headers, sample_document):
        document = create(client, editor_headers, **sample_document)

        response = client.put(f"/api/documents/{document['id']}", json={"title": ""}, headers=editor_headers)
        assert response.status_code == 400

        fetched = client.get(f"/api/documents/{document['id']}", headers=editor_headers).json()["document"]
        assert fetched["version"] == 1
        assert fetched["title"] == sample_document["title"]

    def test_wrong_type_is_a_400(self, client, editor_headers):
        response = client.post("/api/documents", json={"title": "A", "content": "B", "tags": "x"}, headers=editor_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "tags"

    def test_update_of_missing_document(self, client, editor_headers):
        response = client.put(f"/api/documents/{uuid.uuid4()}", json={"content": "C"}, headers=editor_headers)
        assert response.status_code == 404

    def test_delete_of_missing_document_is_not_silent(self, client, editor_headers):
        response = client.delete(f"/api/documents/{uuid.uuid4()}", headers=editor_headers)
        assert response.status_code == 404

    def test_malformed_id_is_not_found(self, client, editor_headers):
        response = client.get("/api/documents/not-a-uuid", headers=editor_headers)
        assert response.status_code == 404


class TestOptimisticConcurrency:
    def test_matching_if_match_applies(self, client, editor_headers, sample_document):
        document = create(client, editor_headers, **sample_document)

        response = client.put(
            f"/api/documents/{document['id']}",
            json={"content": "C"},
            headers={**editor_headers, "If-Match": '"1"'},
        )

        assert response.status_code == 200
        assert response.json()["document"]["version"] == 2

    def test_stale_if_match_conflicts(self, client, editor_headers, sample_document):
        document = create(client, editor_headers, **sample_document)
        client.put(f"/api/documents/{document['id']}", json={"content": "C"}, headers=editor_headers)

        response = client.put(
            f"/api/documents/{document['id']}",
            json={"content": "D"},
            headers={**editor_headers, "If-Match": "1"},
        )

        assert response.status_code == 409
        assert response.json()["currentVersion"] == 2
        fetched = client.get(f"/api/documents/{document['id']}", headers=editor_headers).json()["document"]
        assert fetched["content"] == "C"

    def test_without_if_match_last_write_wins(self, client, editor_headers, admin_headers, sample_document):
        document = create(client, editor_headers, **sample_document)
        client.put(f"/api/documents/{document['id']}", json={"content": "first"}, headers=editor_headers)
        response = client.put(f"/api/documents/{document['id']}", json={"content": "second"}, headers=admin_headers)

        assert response.json()["document"]["content"] == "second"
        assert response.json()["document"]["version"] == 3


class TestDocumentQuery:
    def test_no_filters_returns_all_by_updated_at_desc(self, client, editor_headers):
        first = create(client, editor_headers, title="first", content="x")
        second = create(client, editor_headers, title="second", content="x")
        third = create(client, editor_headers, title="third", content="x")
        client.put(f"/api/documents/{first['id']}", json={"content": "touched"}, headers=editor_headers)

        response = client.get("/api/documents", headers=editor_headers)

        assert response.status_code == 200
        ids = [d["id"] for d in response.json()["documents"]]
        assert ids == [first["id"], third["id"], second["id"]]

    def test_tags_match_any(self, client, editor_headers):
        a = create(client, editor_headers, title="a", content="x", tags=["a"])
        b = create(client, editor_headers, title="b", content="x", tags=["b", "z"])
        create(client, editor_headers, title="c", content="x", tags=["c"])
        create(client, editor_headers, title="none", content="x")

        response = client.get("/api/documents", params={"tags": "a,b"}, headers=editor_headers)

        ids = {d["id"] for d in response.json()["documents"]}
        assert ids == {a["id"], b["id"]}

    def test_category_and_search_combine(self, client, editor_headers):
        match = create(client, editor_headers, title="Dante", content="network audio", category="Audio")
        create(client, editor_headers, title="Dante", content="x", category="Video")
        create(client, editor_headers, title="Other", content="x", category="Audio")

        response = client.get("/api/documents", params={"category": "Audio", "search": "dANTE"}, headers=editor_headers)

        assert [d["id"] for d in response.json()["documents"]] == [match["id"]]

    def test_search_looks_in_content(self, client, editor_headers):
        match = create(client, editor_headers, title="Setup", content="Enable QoS on switches")
        create(client, editor_headers, title="Setup", content="nothing here")

        response = client.get("/api/documents", params={"search": "qos"}, headers=editor_headers)

        assert [d["id"] for d in response.json()["documents"]] == [match["id"]]

    def test_search_wildcards_are_literal(self, client, editor_headers):
        match = create(client, editor_headers, title="100% done", content="x")
        create(client, editor_headers, title="1000 done", content="x")

        response = client.get("/api/documents", params={"search": "100%"}, headers=editor_headers)

        assert [d["id"] for d in response.json()["documents"]] == [match["id"]]
