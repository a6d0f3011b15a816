"""
In-browser model of the generic storefront.

The storefront host configured by BASE_URL is a placeholder, so by default every request to it is answered
by Playwright request interception instead of the network. Pages are rendered from jinja2 templates, catalog
queries (search, filters, sorting, paging) are evaluated here, and everything a customer changes (session,
cart, coupon, orders) lives in the browser's localStorage and is handled by static/storefront.js.
"""
import logging
import math
import re
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional
from urllib.parse import parse_qsl, urlsplit

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape
from playwright.sync_api import Page, Route

from data.test_data import Credentials, Product, PromoCode

STUB_SITE = Path(__file__).parent / 'stub_site'
TAX_RATE = 0.08
SHIPPING_METHODS = [
    {'id': 'standard', 'label': 'Standard', 'price': 500},
    {'id': 'express', 'label': 'Express', 'price': 1500},
]
SORT_OPTIONS = {'price': 'Price: Low to High', 'rating': 'Top Rated', 'newest': 'Newest'}
COUNTRIES = {'US': 'United States', 'CA': 'Canada', 'GB': 'United Kingdom', 'DE': 'Germany'}


def price_in_cents(price: str) -> int:
    return int(round(float(price.lstrip('$').replace(',', '')) * 100))


def _as_float(value: Optional[str]) -> Optional[float]:
    try:
        return float(value) if value not in (None, '') else None
    except ValueError:
        return None


def _as_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value not in (None, '') else default
    except ValueError:
        return default


@dataclass(frozen=True)
class CatalogPage:
    products: list[Product]
    page: int
    pages: int
    total: int

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


class StorefrontStub:
    """
    Serves the storefront from inside a Playwright page.

    Usage:
        stub = StorefrontStub(settings.base_url, STOREFRONT_CATALOG, accounts=[StorefrontUsers.VALID_USER])
        with stub.serve(page):
            page.goto(f'{settings.base_url}/products')
    """

    def __init__(self, base_url: str, catalog: Iterable[Product], accounts: Iterable[Credentials],
                 locked_accounts: Iterable[Credentials] = (), promo_codes: Iterable[PromoCode] = (),
                 page_size: int = 6, logger: Optional[logging.Logger] = None):
        self.base_url = base_url.rstrip('/')
        self.root = urlsplit(self.base_url).path
        self.catalog = list(catalog)
        self.accounts = list(accounts)
        self.locked_accounts = list(locked_accounts)
        self.promo_codes = list(promo_codes)
        self.page_size = page_size
        self.logger = logger or logging.getLogger(__name__)
        self.url_pattern = re.compile(rf'^{re.escape(self.base_url)}(?:[/?#].*)?$')
        self.env = Environment(loader=FileSystemLoader(STUB_SITE / 'templates'),
                               autoescape=select_autoescape(['html']))
        self.env.filters['money'] = lambda cents: f'${cents / 100:.2f}'

    @property
    def categories(self) -> list[str]:
        return sorted({product.category for product in self.catalog})

    def product_by_slug(self, slug: str) -> Optional[Product]:
        return next((product for product in self.catalog if product.slug == slug), None)

    def browser_config(self) -> dict:
        """
        Shop data handed to storefront.js as window.STOREFRONT.
        """
        accounts = {}
        for credentials, locked in [(c, False) for c in self.accounts] + [(c, True) for c in self.locked_accounts]:
            accounts[credentials.email.lower()] = {
                'password': credentials.password,
                'firstName': credentials.first_name,
                'locked': locked,
            }
        return {
            'root': self.root,
            'products': {p.slug: {'name': p.name, 'price': price_in_cents(p.price)} for p in self.catalog},
            'accounts': accounts,
            'promoCodes': {
                promo.code.upper(): {
                    'outcome': promo.outcome.value,
                    'percentOff': promo.percent_off,
                    'amountOff': promo.amount_off * 100,
                } for promo in self.promo_codes
            },
            'shippingMethods': SHIPPING_METHODS,
            'taxRate': TAX_RATE,
        }

    def query_catalog(self, params: Mapping[str, str]) -> CatalogPage:
        """
        Apply the products page query string to the catalog.

        Recognised parameters: q (name substring), min / max (price bounds), category, rating (minimum stars),
        sort ('price', 'rating' or 'newest') and page (1-based, clamped to the available range).
        Unparseable values are ignored.
        """
        products = list(self.catalog)
        query = params.get('q', '').strip().lower()
        if query:
            products = [p for p in products if query in p.name.lower()]
        min_price, max_price = _as_float(params.get('min')), _as_float(params.get('max'))
        if min_price is not None:
            products = [p for p in products if price_in_cents(p.price) >= min_price * 100]
        if max_price is not None:
            products = [p for p in products if price_in_cents(p.price) <= max_price * 100]
        category = params.get('category', '').strip().lower()
        if category:
            products = [p for p in products if p.category.lower() == category]
        rating = _as_int(params.get('rating'), 0)
        if rating:
            products = [p for p in products if p.rating >= rating]

        sort = params.get('sort', '')
        if sort == 'price':
            products.sort(key=lambda p: price_in_cents(p.price))
        elif sort == 'rating':
            products.sort(key=lambda p: p.rating, reverse=True)
        elif sort == 'newest':
            products.reverse()

        pages = max(1, math.ceil(len(products) / self.page_size))
        page = min(max(_as_int(params.get('page'), 1), 1), pages)
        start = (page - 1) * self.page_size
        return CatalogPage(products[start:start + self.page_size], page, pages, len(products))

    def render(self, path: str, params: Mapping[str, str]) -> tuple[int, str, str]:
        """
        Build the response for a path relative to the storefront root.

        Returns:
            tuple[int, str, str]: Status code, content type and body.
        """
        if path == '/static/storefront.js':
            return 200, 'application/javascript', (STUB_SITE / 'static' / 'storefront.js').read_text(encoding='utf-8')

        context = {}
        if path in ('', '/'):
            template, context = 'home.html', {'featured': self.catalog[:4]}
        elif path == '/products':
            template, context = 'products.html', {'listing': self.query_catalog(params), 'params': params,
                                                  'sort_options': SORT_OPTIONS}
        elif path.startswith('/product/'):
            product = self.product_by_slug(path[len('/product/'):])
            if product is None:
                return self._page(404, 'not_found.html', {'path': path})
            template, context = 'product.html', {'product': product}
        elif path == '/checkout':
            template, context = 'checkout.html', {'countries': COUNTRIES}
        else:
            template = {
                '/login': 'login.html',
                '/register': 'register.html',
                '/forgot-password': 'forgot_password.html',
                '/cart': 'cart.html',
                '/order/confirmation': 'confirmation.html',
            }.get(path)
            if template is None:
                return self._page(404, 'not_found.html', {'path': path})
        return self._page(200, template, context)

    def _page(self, status: int, template: str, context: dict) -> tuple[int, str, str]:
        try:
            body = self.env.get_template(template).render(
                root=self.root,
                categories=self.categories,
                shipping_methods=SHIPPING_METHODS,
                config=self.browser_config(),
                **context,
            )
        except TemplateNotFound:
            self.logger.error(f'Storefront template missing: {template}')
            raise
        return status, 'text/html; charset=utf-8', body

    def handle(self, route: Route) -> None:
        url = urlsplit(route.request.url)
        path = url.path[len(self.root):] if url.path.startswith(self.root) else url.path
        status, content_type, body = self.render(path or '/', dict(parse_qsl(url.query)))
        self.logger.debug(f'Storefront stub: {route.request.method} {path or "/"} -> {status}')
        route.fulfill(status=status, content_type=content_type, body=body)

    @contextmanager
    def serve(self, page: Page):
        """
        Answer every request to the storefront host from this stub while the context is active.

        Args:
            page (Page): Page whose requests are intercepted.
        """
        self.logger.info(f'Serving storefront stub for {self.base_url}')
        page.route(self.url_pattern, self.handle)
        try:
            yield self
        finally:
            page.unroute(self.url_pattern, self.handle)
