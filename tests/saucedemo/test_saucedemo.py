import pytest

from data.test_data import BACKPACK_DESCRIPTION, CheckoutData, SauceDemoProducts, SauceDemoUsers

pytestmark = [pytest.mark.saucedemo, pytest.mark.e2e]

BACKPACK = SauceDemoProducts.BACKPACK


class TestSauceDemoShop:

    @pytest.mark.meta(case_id='AQA-1', case_title='Order Backpack Test')
    def test_order_backpack(self, logged_in):
        """
        Steps:
        1. Verify the number of products displayed.
        2. Verify the details of the first product.
        3. Verify the description of the first product.
        4. Verify the price of the first product.
        5. Add the first product to the cart and verify.
        6. Remove the product from the cart and verify.
        7. Add the product to the cart again and proceed to the cart page.
        8. Verify the cart item details.
        9. Proceed to the checkout form.
        10. Fill in the checkout form and continue.
        11. Complete the checkout process and verify the confirmation.
        12. Return to the products page.
        """
        pages = logged_in
        # Step 1
        products = pages.products_page.product_cards
        assert len(products) == 6

        # Step 2
        product = products[0]
        assert product.title == BACKPACK.name
        # Step 3
        assert product.description == BACKPACK_DESCRIPTION
        # Step 4
        assert product.price == BACKPACK.price

        # Step 5
        assert not product.is_added_to_cart
        product.add_to_cart_button.click()
        assert product.is_added_to_cart
        assert pages.products_page.cart_badge.is_visible
        assert pages.products_page.cart_badge.text == '1'

        # Step 6
        product.remove_from_cart_button.click()
        assert not product.is_added_to_cart
        assert not pages.products_page.cart_badge.is_visible

        # Step 7
        product.add_to_cart_button.click()
        pages.products_page.open_cart()
        pages.cart_page.checkout_button.wait_until_visible()

        # Step 8
        assert len(pages.cart_page.cart_items) == 1
        cart_item = pages.cart_page.cart_items[0]
        assert cart_item.title == BACKPACK.name
        assert cart_item.description == BACKPACK_DESCRIPTION
        assert cart_item.price == BACKPACK.price
        assert cart_item.quantity == '1'

        # Step 9
        pages.cart_page.checkout()
        pages.checkout_form.first_name_input.wait_until_visible()

        # Step 10
        pages.checkout_form.fill_information(CheckoutData.VALID_CHECKOUT)
        pages.checkout_form.continue_checkout()

        # Step 11
        pages.checkout_form.finish()
        pages.checkout_form.pony_express_image.wait_until_visible()
        assert pages.checkout_form.complete_header.text == 'Thank you for your order!'
        assert pages.checkout_form.complete_text.text == ('Your order has been dispatched, and will arrive just as '
                                                          'fast as the pony can get there!')
        assert pages.checkout_form.back_to_products_button.is_visible

        # Step 12
        pages.checkout_form.back_to_products_button.click()
        pages.products_page.wait_until_loaded()
        assert pages.products_page.get_cart_count() == '0'


class TestSauceDemoLogin:

    @pytest.fixture(autouse=True)
    def open_login(self, sauce):
        sauce.login_page.open_page()

    @pytest.mark.meta(case_id='TC-001', case_title='Standard user signs in')
    def test_login_standard_user(self, sauce):
        sauce.login_page.login(SauceDemoUsers.STANDARD_USER)
        sauce.products_page.wait_until_loaded()

        assert sauce.products_page.is_logged_in()
        assert sauce.products_page.title.text == 'Products'
        assert 'inventory' in sauce.products_page.session.current_url

    @pytest.mark.meta(case_id='TC-001a', case_title='Problem and glitch users sign in')
    @pytest.mark.parametrize('credentials', [SauceDemoUsers.PROBLEM_USER, SauceDemoUsers.PERFORMANCE_GLITCH_USER],
                             ids=['problem_user', 'performance_glitch_user'])
    def test_login_special_users(self, sauce, credentials):
        sauce.login_page.login(credentials)
        sauce.products_page.wait_until_loaded()

        assert sauce.products_page.is_logged_in()
        assert len(sauce.products_page.product_cards) == 6

    @pytest.mark.meta(case_id='TC-002', case_title='Wrong password is rejected')
    def test_login_invalid_password(self, sauce):
        sauce.login_page.login(SauceDemoUsers.INVALID_PASSWORD)

        assert sauce.login_page.is_error_visible()
        assert 'Username and password do not match' in sauce.login_page.get_error_message()
        assert not sauce.products_page.is_logged_in()

    @pytest.mark.meta(case_id='TC-002a', case_title='Unknown user is rejected')
    def test_login_invalid_user(self, sauce):
        sauce.login_page.login(SauceDemoUsers.INVALID_USER)

        assert 'Username and password do not match' in sauce.login_page.get_error_message()

    @pytest.mark.meta(case_id='TC-003', case_title='Locked out user cannot sign in')
    def test_login_locked_out_user(self, sauce):
        sauce.login_page.login(SauceDemoUsers.LOCKED_OUT_USER)

        assert 'locked out' in sauce.login_page.get_error_message()
        assert sauce.login_page.is_login_form_visible()

    @pytest.mark.meta(case_id='TC-004', case_title='Logout returns to the login form')
    def test_logout(self, sauce):
        sauce.login_page.login(SauceDemoUsers.STANDARD_USER)
        sauce.products_page.wait_until_loaded()

        sauce.products_page.logout()

        assert sauce.login_page.is_login_form_visible()
        assert not sauce.products_page.is_logged_in()


class TestSauceDemoCart:

    @pytest.mark.meta(case_id='TC-005', case_title='Add product to cart')
    def test_add_product(self, logged_in):
        products_page = logged_in.products_page

        products_page.add_product_to_cart(BACKPACK.name)

        assert products_page.get_cart_count() == '1'
        assert products_page.get_product_card(BACKPACK.name).is_added_to_cart

    @pytest.mark.meta(case_id='TC-006', case_title='Add multiple products to cart')
    def test_add_multiple_products(self, logged_in):
        products_page = logged_in.products_page
        products_page.add_product_to_cart(BACKPACK.name)
        products_page.add_product_to_cart(SauceDemoProducts.BIKE_LIGHT.name)
        products_page.add_product_to_cart(SauceDemoProducts.BOLT_TSHIRT.name)

        assert products_page.get_cart_count() == '3'

    @pytest.mark.meta(case_id='TC-007', case_title='Removing every product clears the badge')
    def test_remove_products_clears_badge(self, logged_in):
        products_page = logged_in.products_page
        products_page.add_product_to_cart(BACKPACK.name)
        products_page.add_product_to_cart(SauceDemoProducts.FLEECE_JACKET.name)

        products_page.remove_product_from_cart(BACKPACK.name)
        products_page.remove_product_from_cart(SauceDemoProducts.FLEECE_JACKET.name)

        assert products_page.get_cart_count() == '0'

    @pytest.mark.meta(case_id='TC-008', case_title='Cart lists the added products')
    def test_cart_contents(self, logged_in):
        logged_in.products_page.add_product_to_cart(BACKPACK.name)
        logged_in.products_page.add_product_to_cart(SauceDemoProducts.BIKE_LIGHT.name)

        logged_in.products_page.open_cart()

        assert logged_in.cart_page.title.text == 'Your Cart'
        assert [item.title for item in logged_in.cart_page.cart_items] == [
            BACKPACK.name, SauceDemoProducts.BIKE_LIGHT.name]

    @pytest.mark.meta(case_id='TC-008a', case_title='Continue shopping returns to the inventory')
    def test_continue_shopping(self, logged_in):
        logged_in.products_page.open_cart()

        logged_in.cart_page.continue_shopping()

        assert logged_in.products_page.is_logged_in()
        assert 'inventory' in logged_in.products_page.session.current_url


class TestSauceDemoCheckout:

    @pytest.fixture(autouse=True)
    def open_checkout(self, logged_in):
        logged_in.products_page.add_product_to_cart(BACKPACK.name)
        logged_in.products_page.open_cart()
        logged_in.cart_page.checkout()
        logged_in.checkout_form.first_name_input.wait_until_visible()

    @pytest.mark.meta(case_id='TC-009', case_title='Complete checkout with valid information')
    def test_complete_checkout(self, logged_in):
        logged_in.checkout_form.fill_information(CheckoutData.VALID_CHECKOUT)

        logged_in.checkout_form.continue_checkout()

        assert logged_in.checkout_form.title.text == 'Checkout: Overview'

        logged_in.checkout_form.finish()

        assert 'Thank you for your order' in logged_in.checkout_form.complete_header.text

    @pytest.mark.meta(case_id='TC-010', case_title='First name is required')
    def test_checkout_requires_first_name(self, logged_in):
        logged_in.checkout_form.fill_information(CheckoutData.INVALID_CHECKOUT)

        logged_in.checkout_form.continue_checkout()

        assert 'First Name is required' in logged_in.checkout_form.get_error_message()
        assert logged_in.checkout_form.title.text == 'Checkout: Your Information'

    @pytest.mark.meta(case_id='TC-011', case_title='Cancel returns to the cart')
    def test_checkout_cancel(self, logged_in):
        logged_in.checkout_form.cancel()

        assert logged_in.cart_page.title.text == 'Your Cart'
        assert len(logged_in.cart_page.cart_items) == 1


class TestSauceDemoSorting:

    @pytest.mark.meta(case_id='TC-012', case_title='Sort by name A to Z')
    def test_sort_by_name(self, logged_in):
        logged_in.products_page.sort_by('za')
        logged_in.products_page.sort_by('az')

        names = logged_in.products_page.get_product_names()
        assert names == sorted(names)

    @pytest.mark.meta(case_id='TC-013', case_title='Sort by price low to high')
    def test_sort_by_price(self, logged_in):
        logged_in.products_page.sort_by('lohi')

        prices = logged_in.products_page.get_product_prices()
        assert prices == sorted(prices)
        assert prices[0] == 7.99
