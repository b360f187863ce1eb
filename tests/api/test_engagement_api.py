"""HTTP tests for the feed, swipes, shares, comments, and profile."""

from __future__ import annotations

ALICE = "alice@example.com"
BOB = "bob@example.com"


async def _create(client, auth_headers, email: str = ALICE, title: str = "Idea") -> dict:
    resp = await client.post(
        "/ideas", json={"title": title, "description": "d"}, headers=auth_headers(email)
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


# ---------------------------------------------------------------------------
# Feed + swipe
# ---------------------------------------------------------------------------


async def test_feed_lists_unseen_ideas_newest_first(client, auth_headers) -> None:
    first = await _create(client, auth_headers, title="First")
    second = await _create(client, auth_headers, title="Second")
    await _create(client, auth_headers, email=BOB, title="Bob's own")

    resp = await client.get("/feed", headers=auth_headers(BOB))

    assert resp.status_code == 200
    body = resp.json()
    assert [i["id"] for i in body["ideas"]] == [second["id"], first["id"]]
    assert body["caught_up"] is False


async def test_swipe_right_is_idempotent_over_http(client, auth_headers) -> None:
    idea = await _create(client, auth_headers)

    first = await client.post(f"/ideas/{idea['id']}/swipe", json={"action": "right"}, headers=auth_headers(BOB))
    again = await client.post(f"/ideas/{idea['id']}/swipe", json={"action": "right"}, headers=auth_headers(BOB))

    assert first.status_code == 200
    assert first.json()["counted"] is True
    assert first.json()["metrics"]["likes"] == 1
    assert again.json()["counted"] is False
    assert again.json()["metrics"]["likes"] == 1


async def test_swipe_left_counts_each_pass(client, auth_headers) -> None:
    idea = await _create(client, auth_headers)

    for _ in range(2):
        resp = await client.post(f"/ideas/{idea['id']}/swipe", json={"action": "left"}, headers=auth_headers(BOB))
        assert resp.status_code == 200

    assert resp.json()["metrics"] == {"likes": 0, "passes": 2, "shares": 0}


async def test_swiping_everything_means_caught_up(client, auth_headers) -> None:
    idea = await _create(client, auth_headers)
    await client.post(f"/ideas/{idea['id']}/swipe", json={"action": "left"}, headers=auth_headers(BOB))

    body = (await client.get("/feed", headers=auth_headers(BOB))).json()

    assert body == {"ideas": [], "caught_up": True}


async def test_bad_swipe_action_is_400(client, auth_headers) -> None:
    idea = await _create(client, auth_headers)

    resp = await client.post(f"/ideas/{idea['id']}/swipe", json={"action": "up"}, headers=auth_headers(BOB))

    assert resp.status_code == 400


async def test_swipe_on_missing_idea_is_404(client, auth_headers) -> None:
    resp = await client.post("/ideas/nope/swipe", json={"action": "right"}, headers=auth_headers(BOB))
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Share
# ---------------------------------------------------------------------------


async def test_share_counts_and_returns_links(client, auth_headers) -> None:
    idea = await _create(client, auth_headers)

    link = await client.post(f"/ideas/{idea['id']}/share", headers=auth_headers(BOB))
    tweet = await client.post(
        f"/ideas/{idea['id']}/share", json={"channel": "twitter"}, headers=auth_headers(BOB)
    )

    assert link.status_code == 200
    assert link.json()["target"] == f"https://ideaswipe.example.com/idea/{idea['id']}"
    assert link.json()["metrics"]["shares"] == 1
    assert tweet.json()["target"].startswith("https://twitter.com/intent/tweet?")
    assert tweet.json()["metrics"]["shares"] == 2


async def test_share_missing_idea_is_404(client, auth_headers) -> None:
    resp = await client.post("/ideas/nope/share", headers=auth_headers(BOB))
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Comments + profile
# ---------------------------------------------------------------------------


async def test_post_and_list_comments(client, auth_headers) -> None:
    idea = await _create(client, auth_headers)

    resp = await client.post(
        "/comments", json={"ideaId": idea["id"], "content": "Great idea"}, headers=auth_headers(BOB)
    )
    assert resp.status_code == 200
    comment = resp.json()
    assert comment["idea_id"] == idea["id"]
    assert comment["user_email"] == BOB
    assert comment["content"] == "Great idea"

    listed = await client.get(f"/ideas/{idea['id']}/comments", headers=auth_headers(ALICE))
    assert [c["id"] for c in listed.json()] == [comment["id"]]


async def test_comment_validation_errors_are_400(client, auth_headers) -> None:
    idea = await _create(client, auth_headers)

    empty = await client.post("/comments", json={"ideaId": idea["id"], "content": ""}, headers=auth_headers(BOB))
    bad_id = await client.post("/comments", json={"ideaId": "123", "content": "Hi"}, headers=auth_headers(BOB))

    assert empty.status_code == 400
    assert bad_id.status_code == 400


async def test_profile_lists_own_ideas_with_comments(client, auth_headers) -> None:
    idea = await _create(client, auth_headers, title="Mine")
    await _create(client, auth_headers, email=BOB, title="Theirs")
    await client.post("/comments", json={"ideaId": idea["id"], "content": "Nice"}, headers=auth_headers(BOB))

    resp = await client.get("/profile/ideas", headers=auth_headers(ALICE))

    assert resp.status_code == 200
    body = resp.json()
    assert [i["title"] for i in body] == ["Mine"]
    assert [c["content"] for c in body[0]["comments"]] == ["Nice"]
