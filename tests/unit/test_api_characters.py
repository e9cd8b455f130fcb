"""Tests for roster endpoints."""


def _first_character_id(client, sid):
    return client.get(f"/sessions/{sid}/characters/").json()[0]["id"]


class TestRosterEndpoints:
    def test_add_character(self, client, session_id):
        response = client.post(f"/sessions/{session_id}/characters/")

        assert response.status_code == 201
        assert len(client.get(f"/sessions/{session_id}/characters/").json()) == 2

    def test_sixth_character_rejected(self, client, session_id):
        for _ in range(4):
            assert client.post(f"/sessions/{session_id}/characters/").status_code == 201

        response = client.post(f"/sessions/{session_id}/characters/")

        assert response.status_code == 422
        assert len(client.get(f"/sessions/{session_id}/characters/").json()) == 5

    def test_remove_last_character_rejected(self, client, session_id):
        cid = _first_character_id(client, session_id)
        response = client.delete(f"/sessions/{session_id}/characters/{cid}")
        assert response.status_code == 422

    def test_remove_unknown_character(self, client, session_id):
        assert client.delete(f"/sessions/{session_id}/characters/ghost").status_code == 404

    def test_edit_character(self, client, session_id):
        cid = _first_character_id(client, session_id)

        response = client.patch(
            f"/sessions/{session_id}/characters/{cid}",
            json={"name": "Mira", "personality": "bold"},
        )
        assert response.status_code == 200
        assert response.json()["is_complete"] is False

        response = client.post(f"/sessions/{session_id}/characters/{cid}/traits", json={"trait": "brave"})
        assert response.json()["traits"] == ["brave"]
        assert response.json()["is_complete"] is True

    def test_sixth_trait_rejected(self, client, session_id):
        cid = _first_character_id(client, session_id)
        for trait in ["a", "b", "c", "d", "e"]:
            client.post(f"/sessions/{session_id}/characters/{cid}/traits", json={"trait": trait})

        response = client.post(f"/sessions/{session_id}/characters/{cid}/traits", json={"trait": "f"})

        assert response.status_code == 422
        traits = client.get(f"/sessions/{session_id}/characters/").json()[0]["traits"]
        assert traits == ["a", "b", "c", "d", "e"]

    def test_remove_trait(self, client, session_id):
        cid = _first_character_id(client, session_id)
        client.post(f"/sessions/{session_id}/characters/{cid}/traits", json={"trait": "brave"})

        response = client.delete(f"/sessions/{session_id}/characters/{cid}/traits/brave")
        assert response.json()["traits"] == []

    def test_remove_trait_containing_slash(self, client, session_id):
        cid = _first_character_id(client, session_id)
        client.post(f"/sessions/{session_id}/characters/{cid}/traits", json={"trait": "sky/blue"})
        client.post(f"/sessions/{session_id}/characters/{cid}/traits", json={"trait": "kind"})

        response = client.delete(f"/sessions/{session_id}/characters/{cid}/traits/sky/blue")
        assert response.status_code == 200
        assert response.json()["traits"] == ["kind"]

    def test_replace_roster(self, client, session_id):
        response = client.put(
            f"/sessions/{session_id}/characters/",
            json={"characters": [
                {"name": "Mira", "personality": "bold", "traits": ["brave", " brave ", "curious"]},
                {"name": "Otto"},
            ]},
        )

        assert response.status_code == 200
        characters = response.json()["characters"]
        assert [c["name"] for c in characters] == ["Mira", "Otto"]
        assert characters[0]["traits"] == ["brave", "curious"]

    def test_replace_roster_bounds(self, client, session_id):
        assert client.put(f"/sessions/{session_id}/characters/", json={"characters": []}).status_code == 422
        six = {"characters": [{"name": str(i)} for i in range(6)]}
        assert client.put(f"/sessions/{session_id}/characters/", json=six).status_code == 422


class TestContentSafety:
    def test_unsafe_name_rejected(self, client, session_id):
        cid = _first_character_id(client, session_id)
        response = client.patch(f"/sessions/{session_id}/characters/{cid}", json={"name": "Evil Bob"})

        assert response.status_code == 422
        assert client.get(f"/sessions/{session_id}/characters/").json()[0]["name"] == ""

    def test_unsafe_trait_rejected(self, client, session_id):
        cid = _first_character_id(client, session_id)
        response = client.post(f"/sessions/{session_id}/characters/{cid}/traits", json={"trait": "scary"})
        assert response.status_code == 422

    def test_unsafe_roster_rejected(self, client, session_id):
        response = client.put(
            f"/sessions/{session_id}/characters/",
            json={"characters": [{"name": "Ann", "personality": "loves to fight", "traits": ["bold"]}]},
        )
        assert response.status_code == 422
