# ABOUTME: Maps free-form Open Library subject strings onto a small set of canonical genres.
# ABOUTME: Matching is a case-insensitive substring test against a fixed keyword table.

from collections.abc import Iterable

GENRE_MAP: dict[str, tuple[str, ...]] = {
    "fiction": ("Fiction", "Literary Fiction", "Contemporary Fiction"),
    "novel": ("Fiction", "Literary Fiction"),
    "literary": ("Literary Fiction",),
    "thriller": ("Thriller", "Mystery & Thriller"),
    "mystery": ("Mystery", "Mystery & Thriller"),
    "crime": ("Crime", "Mystery & Thriller"),
    "suspense": ("Thriller", "Mystery & Thriller"),
    "horror": ("Horror",),
    "fantasy": ("Fantasy",),
    "science fiction": ("Science Fiction",),
    "sci-fi": ("Science Fiction",),
    "romance": ("Romance",),
    "historical": ("Historical Fiction",),
    "history": ("History", "Non-Fiction"),
    "biography": ("Biography", "Non-Fiction"),
    "memoir": ("Memoir", "Biography", "Non-Fiction"),
    "autobiography": ("Biography", "Non-Fiction"),
    "non-fiction": ("Non-Fiction",),
    "nonfiction": ("Non-Fiction",),
    "self-help": ("Self-Help", "Non-Fiction"),
    "business": ("Business", "Non-Fiction"),
    "philosophy": ("Philosophy", "Non-Fiction"),
    "psychology": ("Psychology", "Non-Fiction"),
    "politics": ("Politics", "Non-Fiction"),
    "economics": ("Economics", "Non-Fiction"),
    "travel": ("Travel", "Non-Fiction"),
    "humor": ("Humor", "Comedy"),
    "comedy": ("Comedy", "Humor"),
    "adventure": ("Adventure",),
    "action": ("Action", "Adventure"),
    "war": ("War", "Historical Fiction"),
    "dystopian": ("Dystopian", "Science Fiction"),
    "post-apocalyptic": ("Post-Apocalyptic", "Science Fiction"),
    "young adult": ("Young Adult",),
    "children": ("Children's",),
    "classics": ("Classics",),
    "poetry": ("Poetry",),
    "drama": ("Drama",),
    "lgbt": ("LGBTQ+",),
    "lgbtq": ("LGBTQ+",),
    "queer": ("LGBTQ+",),
}


def map_subjects_to_genres(subjects: Iterable[str]) -> list[str]:
    """Collect canonical genres for every keyword found in any subject.

    Genres are returned once each, in the order they were first matched.
    """
    genres: dict[str, None] = {}
    for subject in subjects:
        lowered = subject.lower()
        for keyword, mapped in GENRE_MAP.items():
            if keyword in lowered:
                for genre in mapped:
                    genres.setdefault(genre, None)
    return list(genres)
