"""Engagement statistics over a seller's posts.

Pure functions over already-fetched posts; nothing here touches the database.
"""

from collections.abc import Sequence
from typing import Protocol

from sellerdesk.features.content.schemas import BestContent, ContentAnalytics

BEST_CONTENT_LIMIT = 5


class PostStats(Protocol):
    """The post attributes the analytics read."""

    id: int
    title: str
    media: list[str]
    views: int
    likes: int
    comments: int


def _interactions(post: PostStats) -> int:
    return post.views + post.likes + post.comments


def compute_content_analytics(posts: Sequence[PostStats], followers: int) -> ContentAnalytics:
    """Summarize engagement across posts.

    Args:
        posts: The seller's posts.
        followers: The seller's follower count.

    Returns:
        Totals, engagement rate, content score and the top posts by
        combined views, likes and comments.
    """
    total_views = sum(p.views for p in posts)
    total_likes = sum(p.likes for p in posts)
    total_comments = sum(p.comments for p in posts)

    if posts:
        engagement_rate = round((total_likes + total_comments) / len(posts) * 100, 2)
        content_score = round((total_likes + total_comments + total_views) / len(posts))
    else:
        engagement_rate = 0.0
        content_score = 0

    # sorted() is stable, so ties keep their input order
    ranked = sorted(posts, key=_interactions, reverse=True)[:BEST_CONTENT_LIMIT]

    return ContentAnalytics(
        total_views=total_views,
        total_likes=total_likes,
        total_comments=total_comments,
        engagement_rate=engagement_rate,
        follower_count=followers,
        content_score=content_score,
        best_content=[
            BestContent(
                id=p.id,
                title=p.title,
                media_url=p.media[0] if p.media else "",
                views=p.views,
                likes=p.likes,
                comments=p.comments,
            )
            for p in ranked
        ],
    )
