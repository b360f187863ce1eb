"""Tests for share-link construction."""

from ideaswipe.services.sharing import build_share_links, idea_url


class _Idea:
    id = "6f1c1a57-8a3e-4c59-9d55-2a8c1f0b7e11"
    title = "Drones & groceries"


def test_idea_url_strips_trailing_slash() -> None:
    assert idea_url(_Idea(), "https://ideaswipe.example.com/") == (
        "https://ideaswipe.example.com/idea/6f1c1a57-8a3e-4c59-9d55-2a8c1f0b7e11"
    )


def test_social_links_encode_url_and_title() -> None:
    links = build_share_links(_Idea(), "https://ideaswipe.example.com")
    encoded = "https%3A%2F%2Fideaswipe.example.com%2Fidea%2F6f1c1a57-8a3e-4c59-9d55-2a8c1f0b7e11"

    assert links["url"] == "https://ideaswipe.example.com/idea/6f1c1a57-8a3e-4c59-9d55-2a8c1f0b7e11"
    assert links["twitter"] == (
        "https://twitter.com/intent/tweet?text=Check%20out%20this%20startup%20idea%3A%20"
        f"Drones%20%26%20groceries&url={encoded}"
    )
    assert links["linkedin"] == f"https://www.linkedin.com/sharing/share-offsite/?url={encoded}"
    assert links["facebook"] == f"https://www.facebook.com/sharer/sharer.php?u={encoded}"
