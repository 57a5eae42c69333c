import unittest


class SmokeTest(unittest.TestCase):
    def test_import_domain_modules(self):
        import staging_planner  # noqa: F401
        import staging_planner.builder  # noqa: F401
        import staging_planner.io  # noqa: F401
        import staging_planner.models  # noqa: F401
        import staging_planner.plan  # noqa: F401
        import staging_planner.plan_builder  # noqa: F401


if __name__ == '__main__':
    unittest.main()
