from documents.domain.entities import Document, SearchRequest


def matches(document: Document, request: SearchRequest) -> bool:
    """Return True when ``document`` satisfies every criterion set on ``request``."""
    if request.title_prefixes is not None and not any(
        value in document.title for value in request.title_prefixes
    ):
        return False

    if request.contains_contents is not None and not any(
        value in document.content for value in request.contains_contents
    ):
        return False

    if request.author_ids is not None and document.author.id not in request.author_ids:
        return False

    if request.created_from is not None and document.created < request.created_from:
        return False

    if request.created_to is not None and document.created > request.created_to:
        return False

    return True


def filter_documents(documents, request: SearchRequest | None) -> list[Document]:
    if request is None:
        return list(documents)
    return [doc for doc in documents if matches(doc, request)]
