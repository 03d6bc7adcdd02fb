"""Tests for content engagement analytics."""

from dataclasses import dataclass, field

from sellerdesk.features.content.analytics import compute_content_analytics


@dataclass
class FakePost:
    id: int
    title: str = "Post"
    media: list[str] = field(default_factory=list)
    views: int = 0
    likes: int = 0
    comments: int = 0


class TestComputeContentAnalytics:
    """Tests for compute_content_analytics."""

    def test_no_posts(self):
        analytics = compute_content_analytics([], followers=0)

        assert analytics.total_views == 0
        assert analytics.engagement_rate == 0
        assert analytics.content_score == 0
        assert analytics.best_content == []

    def test_totals_rate_and_score(self):
        posts = [
            FakePost(id=1, views=100, likes=10, comments=2),
            FakePost(id=2, views=50, likes=3, comments=0),
        ]

        analytics = compute_content_analytics(posts, followers=40)

        assert analytics.total_views == 150
        assert analytics.total_likes == 13
        assert analytics.total_comments == 2
        # (13 + 2) / 2 * 100
        assert analytics.engagement_rate == 750.0
        # (13 + 2 + 150) / 2 = 82.5, rounds to even
        assert analytics.content_score == 82
        assert analytics.follower_count == 40

    def test_engagement_rate_two_decimals(self):
        posts = [FakePost(id=1, likes=1), FakePost(id=2), FakePost(id=3)]

        analytics = compute_content_analytics(posts, followers=0)

        assert analytics.engagement_rate == 33.33

    def test_best_content_top_five_by_interactions(self):
        posts = [FakePost(id=i, views=i * 10, media=[f"https://cdn/{i}.jpg"]) for i in range(1, 8)]

        analytics = compute_content_analytics(posts, followers=0)

        assert [b.id for b in analytics.best_content] == [7, 6, 5, 4, 3]
        assert analytics.best_content[0].media_url == "https://cdn/7.jpg"

    def test_best_content_without_media(self):
        analytics = compute_content_analytics([FakePost(id=1)], followers=0)

        assert analytics.best_content[0].media_url == ""
