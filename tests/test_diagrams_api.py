"""Tests for the /api/diagrams endpoints."""

import uuid


def create(client, headers, **payload):
    response = client.post("/api/diagrams", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["diagram"]


GRAPH = {"nodes": [], "edges": []}


class TestDiagramLifecycle:
    def test_create_defaults(self, client, editor_headers):
        diagram = create(client, editor_headers, title="  Rack  ", diagramData=GRAPH)

        assert diagram["title"] == "Rack"
        assert diagram["description"] == ""
        assert diagram["category"] == "General"
        assert diagram["tags"] == []
        assert diagram["isTemplate"] is False
        assert diagram["version"] == 1
        assert diagram["diagramData"] == GRAPH
        assert diagram["createdAt"] == diagram["updatedAt"]

    def test_missing_diagram_data(self, client, editor_headers):
        response = client.post("/api/diagrams", json={"title": "T"}, headers=editor_headers)

        assert response.status_code == 400
        assert response.json()["errors"] == [{"field": "diagramData", "message": "Diagram data is required"}]

    def test_diagram_data_round_trips_untouched(self, client, editor_headers, sample_diagram):
        diagram = create(client, editor_headers, **sample_diagram)

        fetched = client.get(f"/api/diagrams/{diagram['id']}", headers=editor_headers).json()["diagram"]

        assert fetched["diagramData"] == sample_diagram["diagramData"]

    def test_update_template_flag_to_false(self, client, editor_headers, sample_diagram):
        diagram = create(client, editor_headers, **sample_diagram)

        response = client.put(f"/api/diagrams/{diagram['id']}", json={"isTemplate": False}, headers=editor_headers)

        updated = response.json()["diagram"]
        assert updated["isTemplate"] is False
        assert updated["version"] == 2
        assert updated["title"] == sample_diagram["title"]

    def test_update_without_template_flag_keeps_it(self, client, editor_headers, sample_diagram):
        diagram = create(client, editor_headers, **sample_diagram)

        response = client.put(f"/api/diagrams/{diagram['id']}", json={"description": ""}, headers=editor_headers)

        updated = response.json()["diagram"]
        assert updated["isTemplate"] is True
        assert updated["description"] == ""

    def test_delete(self, client, admin_headers, sample_diagram):
        diagram = create(client, admin_headers, **sample_diagram)

        assert client.delete(f"/api/diagrams/{diagram['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/diagrams/{diagram['id']}", headers=admin_headers).status_code == 404
        assert client.delete(f"/api/diagrams/{diagram['id']}", headers=admin_headers).status_code == 404


class TestDuplicate:
    def test_duplicate_template_scenario(self, client, admin_headers):
        source = create(client, admin_headers, title="T", diagramData=GRAPH, isTemplate=True)

        response = client.post(f"/api/diagrams/{source['id']}/duplicate", headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Diagram duplicated successfully"
        copy = body["diagram"]
        assert copy["title"] == "T (Copy)"
        assert copy["isTemplate"] is False
        assert copy["version"] == 1
        assert copy["diagramData"] == GRAPH
        assert copy["id"] != source["id"]

    def test_duplicate_copies_content_and_sets_new_author(self, client, admin_headers, editor_headers, sample_diagram):
        source = create(client, admin_headers, **sample_diagram)
        client.put(f"/api/diagrams/{source['id']}", json={"tags": ["x"]}, headers=admin_headers)

        copy = client.post(f"/api/diagrams/{source['id']}/duplicate", headers=editor_headers).json()["diagram"]

        assert copy["author"]["username"] == "editor_user"
        assert copy["description"] == sample_diagram["description"]
        assert copy["category"] == sample_diagram["category"]
        assert copy["tags"] == ["x"]
        assert copy["diagramData"] == sample_diagram["diagramData"]

        # Source version is untouched by duplication
        source_after = client.get(f"/api/diagrams/{source['id']}", headers=admin_headers).json()["diagram"]
        assert source_after["version"] == 2

    def test_duplicate_missing_source(self, client, editor_headers):
        response = client.post(f"/api/diagrams/{uuid.uuid4()}/duplicate", headers=editor_headers)
        assert response.status_code == 404


class TestDiagramQuery:
    def test_templates_only(self, client, editor_headers):
        template = create(client, editor_headers, title="tpl", diagramData=GRAPH, isTemplate=True)
        regular = create(client, editor_headers, title="reg", diagramData=GRAPH)

        templates = client.get("/api/diagrams", params={"isTemplate": "true"}, headers=editor_headers).json()
        others = client.get("/api/diagrams", params={"isTemplate": "false"}, headers=editor_headers).json()

        assert [d["id"] for d in templates["diagrams"]] == [template["id"]]
        assert [d["id"] for d in others["diagrams"]] == [regular["id"]]

    def test_search_covers_title_or_description(self, client, editor_headers):
        by_title = create(client, editor_headers, title="Huddle room", diagramData=GRAPH)
        by_description = create(client, editor_headers, title="Room B", description="small HUDDLE space", diagramData=GRAPH)
        create(client, editor_headers, title="Auditorium", diagramData=GRAPH)

        response = client.get("/api/diagrams", params={"search": "huddle"}, headers=editor_headers)

        ids = {d["id"] for d in response.json()["diagrams"]}
        assert ids == {by_title["id"], by_description["id"]}

    def test_filters_combine_with_and(self, client, editor_headers):
        match = create(client, editor_headers, title="a", diagramData=GRAPH, category="Audio", tags=["dsp"], isTemplate=True)
        create(client, editor_headers, title="b", diagramData=GRAPH, category="Audio", tags=["dsp"])
        create(client, editor_headers, title="c", diagramData=GRAPH, category="Video", tags=["dsp"], isTemplate=True)

        response = client.get(
            "/api/diagrams",
            params={"category": "Audio", "tags": "dsp,other", "isTemplate": "true"},
            headers=editor_headers,
        )

        assert [d["id"] for d in response.json()["diagrams"]] == [match["id"]]
