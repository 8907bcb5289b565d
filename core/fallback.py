"""
Built-in sample articles served when no source produced anything, so
consumers never see an empty list.
"""
from datetime import datetime, timezone
from typing import List

from core.models import ArticleRecord, Entities

_SAMPLES = [
    ("Times of India", "Government Announces Major Policy Changes",
     "The Union Cabinet has approved an economic reform package aimed at boosting growth and creating jobs, "
     "with tax incentives for manufacturing and digital infrastructure.",
     "politics", "0.20", ["delhi"], ["Modi"],
     "https://timesofindia.indiatimes.com/india/government-announces-major-policy-changes/articleshow/12345678.cms"),
    ("Times of India", "Stock Market Hits New High",
     "Sensex and Nifty reach record levels as foreign investments surge in Indian markets.",
     "business", "0.80", ["mumbai"], ["Sitharaman"],
     "https://timesofindia.indiatimes.com/business/india-business/stock-market-hits-new-high/articleshow/12345679.cms"),
    ("Economic Times", "Farmers Adopt Drought-Resistant Crops",
     "Farmers across the northern states switch to new seed varieties ahead of the kharif harvest.",
     "agriculture", "0.30", ["punjab"], ["Singh"],
     "https://economictimes.indiatimes.com/news/india/farmers-adopt-drought-resistant-crops/articleshow/12345682.cms"),
    ("Hindustan Times", "India vs Australia: Match Preview",
     "India take on Australia in the deciding match of the cricket series at the Wankhede Stadium.",
     "sports", "0.80", ["mumbai"], ["Kohli", "Rohit"],
     "https://www.hindustantimes.com/cricket/india-vs-australia-match-preview-101700000000001.html"),
    ("News18", "Election Results Analysis",
     "A look at the state election results and what they mean for national parties.",
     "politics", "0.40", ["gujarat"], ["Shah", "Gandhi"],
     "https://www.news18.com/india/election-results-analysis-8800001.html"),
    ("India Today", "AI Innovation in Indian Startups",
     "Indian tech startups are leading innovation in artificial intelligence and machine learning.",
     "technology", "0.60", ["kerala"], ["Narayana"],
     "https://www.indiatoday.in/technology/story/ai-innovation-indian-startups-2400001-2024-01-01"),
    ("India Today", "Space Mission Success",
     "ISRO successfully launches a new satellite with advanced earth observation capabilities.",
     "technology", "0.90", ["kerala"], ["Somanath"],
     "https://www.indiatoday.in/science/story/space-mission-success-2400002-2024-01-01"),
]


def fallback_articles() -> List[ArticleRecord]:
    """Fresh copies of the sample records, stamped with the current time."""
    now = datetime.now(timezone.utc)
    return [
        ArticleRecord(
            source=source,
            title=title,
            summary=summary,
            topic=topic,
            sentiment=sentiment,
            entities=Entities(states=frozenset(states), people=frozenset(people)),
            url=url,
            timestamp=now,
        )
        for source, title, summary, topic, sentiment, states, people, url in _SAMPLES
    ]
