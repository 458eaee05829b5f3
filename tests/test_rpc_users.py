import uuid

from tests.conftest import uniq_email

PWD = "secret1"

def register(client, email, pwd=PWD, name="T"):
    return client.post("/rpc/createUser", json={"email": email, "password": pwd, "name": name})

def login(client, email, pwd=PWD):
    return client.post("/rpc/loginUser", json={"email": email, "password": pwd})


def test_create_user_201(client):
    e = uniq_email()
    r = register(client, e, name="Ok")
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["email"] == e
    assert body["name"] == "Ok"
    assert body["password_hash"] == PWD
    assert body["id"] and body["created_at"]

def test_create_user_duplicate_email_409(client):
    e = uniq_email()
    assert register(client, e).status_code == 201
    r = register(client, e)
    assert r.status_code == 409
    assert "constraint" in r.json()["detail"]

def test_create_user_validation_422(client):
    assert register(client, uniq_email(), pwd="short").status_code == 422
    assert register(client, uniq_email(), name="").status_code == 422
    assert register(client, "not-an-email").status_code == 422

def test_login_roundtrip(client):
    e = uniq_email()
    created = register(client, e).json()
    r = login(client, e)
    assert r.status_code == 200
    assert r.json() == created

def test_login_unknown_email_401(client):
    r = login(client, uniq_email())
    assert r.status_code == 401
    assert r.json()["detail"] == "invalid credentials"

def test_login_with_several_users(client):
    emails = [uniq_email(p) for p in ("a", "b", "c")]
    for e in emails:
        register(client, e, name=e.split("-")[0])
    r = login(client, emails[2])
    assert r.status_code == 200
    assert r.json()["email"] == emails[2]
    assert r.json()["name"] == "c"

def test_email_kept_as_sent(client):
    e = f"Mixed.{uuid.uuid4().hex[:6]}@Example.COM"
    r = register(client, e)
    assert r.status_code == 201, r.text
    assert r.json()["email"] == e
    assert login(client, e).json()["email"] == e
