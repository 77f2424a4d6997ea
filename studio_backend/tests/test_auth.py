import unittest

from studio_backend.auth import DEMO_USER_ID, DemoUserResolver, extract_bearer_token


class AuthTests(unittest.TestCase):
    def test_extract_bearer_token(self):
        self.assertEqual(extract_bearer_token("Bearer abc.def"), "abc.def")
        self.assertIsNone(extract_bearer_token(None))
        self.assertIsNone(extract_bearer_token(""))
        self.assertIsNone(extract_bearer_token("Bearer "))
        self.assertIsNone(extract_bearer_token("Basic abc"))

    def test_demo_resolver_maps_every_token_to_one_user(self):
        resolver = DemoUserResolver()
        self.assertEqual(resolver.resolve("one"), DEMO_USER_ID)
        self.assertEqual(resolver.resolve("two"), DEMO_USER_ID)
        self.assertIsNone(resolver.resolve(""))


if __name__ == "__main__":
    unittest.main()
