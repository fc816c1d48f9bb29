"""
Newsroom Kernel — Demo Content

Sample posts and reader comments for local development and demos.
Only applied when the site is built with seeding enabled.
"""

from __future__ import annotations

from newsroom.kernel.types import Comment, Post

DEMO_POSTS: list[Post] = [
    Post(
        id="demo-ai-future",
        title="The Future of Artificial Intelligence: What to Expect in 2025",
        content="Artificial intelligence keeps moving from research labs into everyday products.",
        excerpt="A look at where neural networks and language models are heading next.",
        image="https://images.unsplash.com/photo-1697577418970-95d99b5a55cf",
        author="Sarah Chen",
        date="2025-01-15",
        read_time="8 min read",
        category="ai",
        status="published",
        tags=["AI", "Machine Learning", "Future Tech"],
        views="2.4K",
    ),
    Post(
        id="demo-zero-trust",
        title="Zero Trust Security: A Practical Guide",
        content="Zero trust assumes every request may be hostile until proven otherwise.",
        excerpt="Why perimeter security is no longer enough.",
        image="https://images.unsplash.com/photo-1758983308742-f4ba1f8c8cb4",
        author="Marcus Rodriguez",
        date="2025-01-12",
        read_time="6 min read",
        category="cybersecurity",
        status="published",
        tags=["Security", "Networking"],
        views="1.8K",
    ),
    Post(
        id="demo-foldables",
        title="Foldable Phones Two Years On",
        content="Hinges got sturdier and creases got shallower. Are foldables ready?",
        excerpt="A hands-on look at this year's foldables.",
        image="https://images.unsplash.com/photo-1758784211688-ab9177d65bb3",
        author="Emily Park",
        date="2025-01-10",
        read_time="5 min read",
        category="gadgets",
        status="published",
        tags=["Mobile", "Reviews"],
        views="950",
    ),
    Post(
        id="demo-rust-python",
        title="Writing Python Extensions in Rust",
        content="Draft notes on building native extensions with PyO3 and maturin.",
        excerpt="Speed up hot paths without leaving Python.",
        image="https://images.unsplash.com/photo-1650600538903-ec09f670c391",
        author="David Kim",
        date="2025-01-08",
        read_time="10 min read",
        category="programming",
        status="draft",
        tags=["Python", "Rust"],
        views="0",
    ),
]

DEMO_COMMENTS: list[Comment] = [
    Comment(
        id="demo-comment-1",
        author="Alex Thompson",
        content=(
            "Fascinating insights! The section on neural networks was particularly "
            "enlightening. Thank you for breaking down such complex concepts."
        ),
        date="2025-01-15",
        likes=12,
    ),
    Comment(
        id="demo-comment-2",
        author="Sophia Martinez",
        content=(
            "Great article! I've been following AI developments closely, and your "
            "perspective on the future implications is spot on."
        ),
        date="2025-01-15",
        likes=8,
    ),
]


def demo_comments(post_id: str) -> list[Comment]:
    """Every post opens with the same two demo comments."""
    return DEMO_COMMENTS
