from .feed_markup import FEED_URL, PAGE_URL, author_block, feed_page, tweet

__all__ = ["FEED_URL", "PAGE_URL", "author_block", "feed_page", "tweet"]
