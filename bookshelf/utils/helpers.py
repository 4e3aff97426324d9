def author_filter(author: str) -> dict:
    return {"author": author}


def genre_filter(genre: str) -> dict:
    """
    Exact, case-sensitive match on the genre field.

    Books are stored with the genre exactly as written ("Sci-Fi"), so the
    delete script and the walkthrough must agree on spelling.
    """
    return {"genre": genre}


def published_after_filter(year: int) -> dict:
    return {"publishedYear": {"$gt": year}}


def format_documents(docs) -> str:
    """
    One line per document, used when logging what a query returned.
    """
    docs = list(docs)
    if not docs:
        return "(no documents)"
    return "\n".join(
        "  " + ", ".join(f"{k}={v}" for k, v in doc.items() if k != "_id")
        for doc in docs
    )
