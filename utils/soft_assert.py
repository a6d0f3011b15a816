class SoftAssertContextManager:
    """
    Collects assertion failures so a test can check several pieces of page state in one pass.

    Usage:
        with soft_assert:
            assert cart_page.get_subtotal() == '$29.99'
        with soft_assert:
            assert cart_page.get_tax_cost() == '$2.40'

    The soft_assert fixture calls assert_all() on teardown, so collected failures still fail the test.
    """

    def __init__(self):
        self.failures = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        """
        Record an AssertionError and suppress it. Any other exception propagates.
        """
        if exc_type is AssertionError:
            self.failures.append(f'{len(self.failures) + 1}. Line: {traceback.tb_lineno}. \n{exc_value} ')
            return True
        return False

    def has_failures(self) -> bool:
        return bool(self.failures)

    def get_failures(self) -> list[str]:
        return self.failures

    def assert_all(self) -> None:
        """
        Raise a single AssertionError listing every collected failure.

        Raises:
            AssertionError: If at least one soft assertion failed.
        """
        if self.failures:
            raise AssertionError(f'{len(self.failures)} soft assertion(s) failed:\n' + '\n'.join(self.failures))
