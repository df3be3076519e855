import pytest

from campus_cms import create_app
from campus_cms.extensions import db
from campus_cms.models import Institution, User
from campus_cms.application.context import Role, TenantContext


@pytest.fixture
def app(tmp_path):
    app = create_app(
        "testing",
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'campus_cms.db'}",
    )

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _institution(name, subdomain):
    institution = Institution()
    institution.name = name
    institution.email = f"web@{subdomain}.example.edu"
    institution.subdomain = subdomain
    db.session.add(institution)
    return institution


def _user(institution, name, role):
    user = User()
    user.institution_id = institution.id
    user.name = name
    user.email = f"{name.lower()}@{institution.subdomain}.example.edu"
    user.role = role.value
    db.session.add(user)
    return user


@pytest.fixture
def tenants(app):
    north = _institution("North College", "north")
    south = _institution("South University", "south")
    db.session.flush()

    users = {
        "admin": _user(north, "Ada", Role.SUPER_ADMIN),
        "editor": _user(north, "Eli", Role.EDITOR),
        "viewer": _user(north, "Vic", Role.VIEWER),
        "other_editor": _user(south, "Sam", Role.EDITOR),
    }
    db.session.commit()

    def ctx(key):
        user = users[key]
        return TenantContext(
            institution_id=user.institution_id,
            user_id=user.id,
            role=Role(user.role),
        )

    return {
        "north": north.id,
        "south": south.id,
        "admin": ctx("admin"),
        "editor": ctx("editor"),
        "viewer": ctx("viewer"),
        "other_editor": ctx("other_editor"),
    }


@pytest.fixture
def editor(tenants):
    return tenants["editor"]


@pytest.fixture
def other_editor(tenants):
    return tenants["other_editor"]
