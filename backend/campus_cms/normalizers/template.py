def normalize_template(template, include_document=True):
    data = {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "category": template.category,
        "thumbnail": template.thumbnail,
        "is_public": template.is_public,
        "created_at": template.created_at.isoformat(),
    }

    if include_document:
        data["document"] = template.document

    return data
