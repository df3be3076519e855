def normalize_page(page, include_document=True):
    data = {
        "id": page.id,
        "institution_id": page.institution_id,
        "name": page.name,
        "slug": page.slug,
        "is_published": page.is_published,
        "semantic_version": page.semantic_version,
        "latest_version": page.version_counter,
        "updated_by": page.updated_by,
        "created_at": page.created_at.isoformat(),
        "updated_at": page.updated_at.isoformat(),
    }

    if include_document:
        data["document"] = page.document

    return data
