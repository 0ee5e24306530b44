"""
In-memory post source backing the demo listing.

Stands in for the paged data query a real host app would run: it only answers
"how many posts are there" and "give me this slice".
"""
from typing import Any, Dict, List

from logger import logger


class SamplePostSource:
    """
    Deterministic list of placeholder posts.

    Args:
        count: Number of posts to generate
    """

    def __init__(self, count: int):
        self._posts = [
            {
                'id': post_id,
                'title': f"Sample post {post_id}",
                'body': f"Body text of sample post {post_id}."
            }
            for post_id in range(1, count + 1)
        ]
        logger.debug(f"Sample post source ready with {count} posts")

    def count(self) -> int:
        return len(self._posts)

    def get_page(self, offset: int, limit: int) -> List[Dict[str, Any]]:
        """Return up to `limit` posts starting at index `offset`."""
        return self._posts[offset:offset + limit]
