"""Blog API tests: authentication, ownership and validation."""

from __future__ import annotations

import os
import unittest

from fastapi.testclient import TestClient

from bloglist.auth.tokens import TokenService
from bloglist.core.config import get_settings
from bloglist.errors import AuthorizationError
from bloglist.main import create_app
from bloglist.repositories.memory import InMemoryStore
from bloglist.schemas.auth import AuthenticatedUser
from bloglist.schemas.blog import BlogPayload
from bloglist.services.blogs import BlogService

_INITIAL_BLOGS = (
    {"title": "React v16.13.0", "author": "Sunil Pai", "url": "https://www.reactjs.org", "likes": 5},
    {
        "title": "Building Great User Experiences with Concurrent Mode and Suspense",
        "author": "Joseph Savona",
        "url": "https://www.ra.com",
        "likes": 1,
    },
)


class _SettingsEnvCase(unittest.TestCase):
    _env_keys = (
        "BLOGLIST_SECRET",
        "BLOGLIST_BCRYPT_ROUNDS",
        "BLOGLIST_TOKEN_TTL_SECONDS",
    )

    def setUp(self) -> None:
        self._old_env = {k: os.environ.get(k) for k in self._env_keys}
        os.environ["BLOGLIST_SECRET"] = "test-signing-secret"
        os.environ["BLOGLIST_BCRYPT_ROUNDS"] = "4"
        os.environ.pop("BLOGLIST_TOKEN_TTL_SECONDS", None)
        get_settings.cache_clear()

    def tearDown(self) -> None:
        for key, value in self._old_env.items():
            if value is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = value
        get_settings.cache_clear()


class _BlogApiCase(_SettingsEnvCase):
    def setUp(self) -> None:
        super().setUp()
        self.app = create_app()
        self.client = TestClient(self.app)
        self.store: InMemoryStore = self.app.state.store

    def _register_and_login(self, username: str, password: str = "sekret") -> tuple[str, dict[str, str]]:
        created = self.client.post("/api/users", json={"username": username, "password": password})
        self.assertEqual(created.status_code, 201)
        login = self.client.post("/api/login", json={"username": username, "password": password})
        self.assertEqual(login.status_code, 200)
        return created.json()["id"], {"Authorization": f"Bearer {login.json()['token']}"}

    def _create_blog(self, headers: dict[str, str], body: dict) -> dict:
        response = self.client.post("/api/blogs", headers=headers, json=body)
        self.assertEqual(response.status_code, 201)
        return response.json()


class BlogCreationApiTests(_BlogApiCase):
    def test_authenticated_create_persists_owner_and_back_reference(self) -> None:
        user_id, headers = self._register_and_login("root")

        blog = self._create_blog(headers, _INITIAL_BLOGS[0])

        self.assertEqual(blog["title"], "React v16.13.0")
        self.assertEqual(blog["likes"], 5)
        self.assertEqual(blog["comments"], [])
        self.assertEqual(blog["user"], {"id": user_id, "username": "root", "name": None})
        self.assertEqual(self.store.get_user(user_id).blog_ids, [blog["id"]])

        listed = self.client.get("/api/blogs")
        self.assertEqual(listed.status_code, 200)
        self.assertEqual([b["id"] for b in listed.json()], [blog["id"]])
        self.assertEqual(listed.json()[0]["user"]["username"], "root")

    def test_likes_default_to_zero(self) -> None:
        _, headers = self._register_and_login("root")

        blog = self._create_blog(headers, {"title": "Testing Likes", "author": "FooBar", "url": "https://www.example.com"})

        self.assertEqual(blog["likes"], 0)
        self.assertEqual(self.store.get_blog(blog["id"]).likes, 0)

    def test_missing_title_or_url_is_rejected_without_side_effect(self) -> None:
        _, headers = self._register_and_login("root")

        cases = (
            ({"author": "FooBar", "url": "https://www.example.com"}, "title is required"),
            ({"title": "No url", "author": "FooBar"}, "url is required"),
            ({"author": "FooBar", "likes": 8}, "title is required"),
            ({"title": "", "url": "https://www.example.com"}, "title is required"),
            ({"title": "   ", "url": "https://www.example.com"}, "title is required"),
            ({"title": "Blank url", "url": " \t "}, "url is required"),
        )
        for body, message in cases:
            with self.subTest(body=body):
                response = self.client.post("/api/blogs", headers=headers, json=body)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"error": message, "code": "VALIDATION_ERROR"})

        self.assertEqual(len(self.store.blogs), 0)
        self.assertEqual(self.store.blog_write_count, 0)

    def test_negative_boolean_or_non_integer_likes_are_rejected(self) -> None:
        _, headers = self._register_and_login("root")

        for likes in (-1, "many", True, "5"):
            with self.subTest(likes=likes):
                response = self.client.post(
                    "/api/blogs",
                    headers=headers,
                    json={"title": "T", "url": "https://www.example.com", "likes": likes},
                )
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json()["code"], "VALIDATION_ERROR")

        self.assertEqual(len(self.store.blogs), 0)

    def test_missing_malformed_or_forged_token_is_rejected_without_side_effect(self) -> None:
        user_id, _ = self._register_and_login("root")
        forged = TokenService("not-the-server-secret").issue(user_id=user_id, username="root")

        for headers in (
            {},
            {"Authorization": "Basic cm9vdDpyb290"},
            {"Authorization": "Bearer not-a-jwt"},
            {"Authorization": f"Bearer {forged}"},
        ):
            with self.subTest(headers=headers):
                response = self.client.post("/api/blogs", headers=headers, json=_INITIAL_BLOGS[0])
                self.assertEqual(response.status_code, 401)
                self.assertEqual(response.json(), {"error": "token missing or invalid", "code": "UNAUTHORIZED"})

        self.assertEqual(self.store.blog_write_count, 0)
        self.assertEqual(self.store.get_user(user_id).blog_ids, [])

    def test_token_of_removed_user_is_rejected(self) -> None:
        user_id, headers = self._register_and_login("root")
        del self.store.users[user_id]

        response = self.client.post("/api/blogs", headers=headers, json=_INITIAL_BLOGS[0])

        self.assertEqual(response.status_code, 401)
        self.assertEqual(self.store.blog_write_count, 0)


class BlogDeletionApiTests(_BlogApiCase):
    def test_owner_can_delete_and_other_user_cannot(self) -> None:
        _, owner_headers = self._register_and_login("root")
        _, other_headers = self._register_and_login("superroot")
        blog_a = self._create_blog(owner_headers, _INITIAL_BLOGS[0])
        blog_b = self._create_blog(other_headers, _INITIAL_BLOGS[1])

        denied = self.client.delete(f"/api/blogs/{blog_a['id']}", headers=other_headers)

        self.assertEqual(denied.status_code, 403)
        self.assertEqual(
            denied.json(),
            {"error": "insufficient permission to modify blog", "code": "FORBIDDEN"},
        )
        self.assertEqual(
            sorted(b["id"] for b in self.client.get("/api/blogs").json()),
            sorted([blog_a["id"], blog_b["id"]]),
        )

        deleted = self.client.delete(f"/api/blogs/{blog_a['id']}", headers=owner_headers)

        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(deleted.content, b"")
        self.assertEqual([b["id"] for b in self.client.get("/api/blogs").json()], [blog_b["id"]])

    def test_delete_cleans_owner_back_reference(self) -> None:
        user_id, headers = self._register_and_login("root")
        kept = self._create_blog(headers, _INITIAL_BLOGS[0])
        removed = self._create_blog(headers, _INITIAL_BLOGS[1])

        self.assertEqual(self.client.delete(f"/api/blogs/{removed['id']}", headers=headers).status_code, 204)

        self.assertEqual(self.store.get_user(user_id).blog_ids, [kept["id"]])
        user = self.client.get(f"/api/users/{user_id}").json()
        self.assertEqual([b["id"] for b in user["blogs"]], [kept["id"]])

    def test_delete_requires_authentication(self) -> None:
        _, headers = self._register_and_login("root")
        blog = self._create_blog(headers, _INITIAL_BLOGS[0])
        writes_before = self.store.blog_write_count

        missing = self.client.delete(f"/api/blogs/{blog['id']}")
        forged_token = TokenService("other-secret").issue(user_id="a" * 32, username="root")
        forged = self.client.delete(f"/api/blogs/{blog['id']}", headers={"Authorization": f"Bearer {forged_token}"})

        self.assertEqual(missing.status_code, 401)
        self.assertEqual(forged.status_code, 401)
        self.assertEqual(self.store.blog_write_count, writes_before)
        self.assertIsNotNone(self.store.get_blog(blog["id"]))

    def test_unknown_and_malformed_ids(self) -> None:
        _, headers = self._register_and_login("root")

        unknown = self.client.delete(f"/api/blogs/{'f' * 32}", headers=headers)
        self.assertEqual(unknown.status_code, 404)
        self.assertEqual(unknown.json(), {"error": "blog not found", "code": "RESOURCE_NOT_FOUND"})

        malformed = self.client.delete("/api/blogs/5f1357fb6c38", headers=headers)
        self.assertEqual(malformed.status_code, 400)
        self.assertEqual(malformed.json(), {"error": "malformatted id", "code": "MALFORMED_ID"})

    def test_two_owner_scenario(self) -> None:
        u1_id, u1_headers = self._register_and_login("root")
        u2_id, u2_headers = self._register_and_login("superroot")
        blog_a = self._create_blog(u1_headers, _INITIAL_BLOGS[0])
        blog_b = self._create_blog(u2_headers, _INITIAL_BLOGS[1])
        self.assertEqual(self.store.get_blog(blog_a["id"]).user_id, u1_id)
        self.assertEqual(self.store.get_blog(blog_b["id"]).user_id, u2_id)

        as_u2 = self.client.delete(f"/api/blogs/{blog_a['id']}", headers=u2_headers)
        self.assertEqual(as_u2.status_code, 403)
        self.assertEqual(set(self.store.blogs), {blog_a["id"], blog_b["id"]})

        as_u1 = self.client.delete(f"/api/blogs/{blog_a['id']}", headers=u1_headers)
        self.assertEqual(as_u1.status_code, 204)
        self.assertEqual(set(self.store.blogs), {blog_b["id"]})


class BlogReplacementApiTests(_BlogApiCase):
    def test_owner_replaces_all_mutable_fields(self) -> None:
        user_id, headers = self._register_and_login("root")
        blog = self._create_blog(headers, _INITIAL_BLOGS[0])
        self.client.put(f"/api/blogs/{blog['id']}/comments", json={"comment": "nice"})

        response = self.client.put(
            f"/api/blogs/{blog['id']}",
            headers=headers,
            json={"title": "React v17", "url": "https://react.dev"},
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["title"], "React v17")
        self.assertEqual(body["url"], "https://react.dev")
        self.assertIsNone(body["author"])
        self.assertEqual(body["likes"], 0)
        self.assertEqual(body["comments"], ["nice"])
        self.assertEqual(body["user"]["id"], user_id)

    def test_non_owner_cannot_replace(self) -> None:
        _, owner_headers = self._register_and_login("root")
        _, other_headers = self._register_and_login("superroot")
        blog = self._create_blog(owner_headers, _INITIAL_BLOGS[0])
        writes_before = self.store.blog_write_count

        response = self.client.put(
            f"/api/blogs/{blog['id']}",
            headers=other_headers,
            json={"title": "Hijacked", "url": "https://evil.example"},
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.store.blog_write_count, writes_before)
        self.assertEqual(self.store.get_blog(blog["id"]).title, "React v16.13.0")

    def test_replace_requires_authentication_and_valid_fields(self) -> None:
        _, headers = self._register_and_login("root")
        blog = self._create_blog(headers, _INITIAL_BLOGS[0])

        unauthenticated = self.client.put(f"/api/blogs/{blog['id']}", json={"title": "T", "url": "https://x.example"})
        self.assertEqual(unauthenticated.status_code, 401)

        missing_url = self.client.put(f"/api/blogs/{blog['id']}", headers=headers, json={"title": "T"})
        self.assertEqual(missing_url.status_code, 400)
        self.assertEqual(missing_url.json()["error"], "url is required")

        unknown = self.client.put(f"/api/blogs/{'0' * 32}", headers=headers, json={"title": "T", "url": "https://x"})
        self.assertEqual(unknown.status_code, 404)

        self.assertEqual(self.store.get_blog(blog["id"]).title, "React v16.13.0")


class BlogReadAndCommentApiTests(_BlogApiCase):
    def test_get_single_blog(self) -> None:
        _, headers = self._register_and_login("root")
        blog = self._create_blog(headers, _INITIAL_BLOGS[0])

        found = self.client.get(f"/api/blogs/{blog['id']}")
        self.assertEqual(found.status_code, 200)
        self.assertEqual(found.json(), blog)

        self.assertEqual(self.client.get(f"/api/blogs/{'0' * 32}").status_code, 404)
        self.assertEqual(self.client.get("/api/blogs/not-an-id").status_code, 400)

    def test_anyone_can_append_comments_in_order(self) -> None:
        _, headers = self._register_and_login("root")
        blog = self._create_blog(headers, _INITIAL_BLOGS[0])

        first = self.client.put(f"/api/blogs/{blog['id']}/comments", json={"comment": "first!"})
        second = self.client.put(f"/api/blogs/{blog['id']}/comments", json={"comment": "second"})

        self.assertEqual(first.status_code, 200)
        self.assertEqual(second.status_code, 200)
        self.assertEqual(second.json()["comments"], ["first!", "second"])

    def test_comment_errors(self) -> None:
        _, headers = self._register_and_login("root")
        blog = self._create_blog(headers, _INITIAL_BLOGS[0])

        unknown = self.client.put(f"/api/blogs/{'0' * 32}/comments", json={"comment": "hi"})
        self.assertEqual(unknown.status_code, 404)

        empty = self.client.put(f"/api/blogs/{blog['id']}/comments", json={"comment": "   "})
        self.assertEqual(empty.status_code, 400)
        self.assertEqual(empty.json()["error"], "comment is required")
        self.assertEqual(self.store.get_blog(blog["id"]).comments, [])


class BlogServiceUnitTests(unittest.TestCase):
    def test_service_scopes_mutations_to_owner(self) -> None:
        store = InMemoryStore()
        owner = store.create_user(username="owner", password_hash="unused")
        other = store.create_user(username="other", password_hash="unused")
        service = BlogService(store)
        owner_identity = AuthenticatedUser(user_id=owner.id, username="owner")
        other_identity = AuthenticatedUser(user_id=other.id, username="other")

        blog = service.create_blog(
            identity=owner_identity,
            payload=BlogPayload(title="Mine", url="https://example.com"),
        )

        with self.assertRaises(AuthorizationError):
            service.delete_blog(identity=other_identity, blog_id=blog.id)
        self.assertIn(blog.id, store.blogs)

        service.delete_blog(identity=owner_identity, blog_id=blog.id)
        self.assertNotIn(blog.id, store.blogs)
        self.assertEqual(store.get_user(owner.id).blog_ids, [])


if __name__ == "__main__":
    unittest.main()
