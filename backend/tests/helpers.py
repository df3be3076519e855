from flask_jwt_extended import create_access_token

from campus_cms.application.context import TenantContext


def auth_headers(ctx: TenantContext):
    token = create_access_token(
        identity=ctx.user_id,
        additional_claims={
            "institution_id": ctx.institution_id,
            "role": ctx.role.value,
        },
    )
    return {"Authorization": f"Bearer {token}"}


def hero_document(title="Welcome"):
    return {
        "components": [
            {
                "id": "hero-1",
                "type": "HeroBanner",
                "props": {"title": title, "cta": {"label": "Apply", "href": "/apply"}},
                "children": [
                    {"id": "hero-1-img", "type": "Image", "props": {"src": "/hero.png"}},
                ],
            }
        ],
        "meta": {"title": title},
    }
