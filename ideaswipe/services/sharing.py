"""Share-link construction for the share dialog."""

from urllib.parse import quote

from ideaswipe.models.idea import Idea

SHARE_TEXT = "Check out this startup idea: {title}"


def idea_url(idea: Idea, base_url: str) -> str:
    return f"{base_url.rstrip('/')}/idea/{idea.id}"


def build_share_links(idea: Idea, base_url: str) -> dict:
    url = idea_url(idea, base_url)
    encoded_url = quote(url, safe="")
    text = quote(SHARE_TEXT.format(title=idea.title), safe="")
    return {
        "url": url,
        "twitter": f"https://twitter.com/intent/tweet?text={text}&url={encoded_url}",
        "linkedin": f"https://www.linkedin.com/sharing/share-offsite/?url={encoded_url}",
        "facebook": f"https://www.facebook.com/sharer/sharer.php?u={encoded_url}",
    }
