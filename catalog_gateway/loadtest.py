# catalog_gateway/loadtest.py
"""
Synthetic traffic against a running gateway.

    catalog-gateway-loadtest --base-url http://localhost:8080 --requests 1000 --concurrency 50

Each request picks a random endpoint; a semaphore bounds how many are in
flight and a fixed delay separates launches.
"""
import argparse
import asyncio
import logging
import random
import sys
import time
from dataclasses import dataclass

import httpx

from catalog_gateway.logging_config import configure_logging

logger = logging.getLogger(__name__)

SEARCH_TERMS = ["laptop", "phone", "book", "shoes", "watch", "camera"]
CATEGORIES = ["Electronics", "Clothing", "Books", "Home", "Sports"]
BRANDS = ["BrandA", "BrandB", "BrandC", "BrandD", "BrandE"]
TAG_SETS = [["new", "sale", "popular"], ["featured", "bestseller"], ["limited", "exclusive"]]
ORDER_STATUSES = ["pending", "processing", "shipped", "delivered"]
PAYMENT_METHODS = ["credit_card", "debit_card", "paypal", "cash"]
COMMENTS = ["Great product!", "Excellent quality", "Very satisfied", "Could be better", "Amazing purchase"]
ANALYTICS_PATHS = [
    "/api/analytics/sales?start_date=2024-01-01&end_date=2024-12-31",
    "/api/analytics/popular-products",
    "/api/analytics/revenue",
]


# Request generators: (method, path, json body or None)

def health_check():
    return "GET", "/health", None


def list_users():
    return "GET", "/api/users", None


def list_products():
    return "GET", "/api/products", None


def list_orders():
    return "GET", "/api/orders", None


def list_inventory():
    return "GET", "/api/inventory", None


def list_categories():
    return "GET", "/api/categories", None


def search_products():
    return "GET", f"/api/products/search?q={random.choice(SEARCH_TERMS)}", None


def read_analytics():
    return "GET", random.choice(ANALYTICS_PATHS), None


def list_reviews():
    return "GET", f"/api/reviews/product/prod{random.randint(1, 100)}", None


def create_user():
    n = random.randrange(10000)
    return "POST", "/api/users", {
        "name": f"User_{n}",
        "email": f"user{random.randrange(10000)}@example.com",
        "password": "password123",
        "address": f"{random.randrange(1000)} Main St, City, State",
        "phone": f"+1-555-{random.randrange(10000):04d}",
    }


def create_product():
    return "POST", "/api/products", {
        "name": f"Product_{random.randrange(10000)}",
        "description": f"Description for product {random.randrange(10000)}",
        "price": random.randrange(1000) + 0.99,
        "category": random.choice(CATEGORIES),
        "brand": random.choice(BRANDS),
        "image_url": f"https://example.com/image{random.randrange(100)}.jpg",
        "rating": float(random.randint(1, 5)),
        "tags": random.choice(TAG_SETS),
    }


def create_order():
    return "POST", "/api/orders", {
        "user_id": random.randint(1, 100),
        "total_amount": random.randrange(500) + 0.99,
        "status": random.choice(ORDER_STATUSES),
        "payment_method": random.choice(PAYMENT_METHODS),
        "shipping_address": f"{random.randrange(1000)} Shipping St, City, State",
    }


def create_review():
    return "POST", "/api/reviews", {
        "product_id": f"prod{random.randint(1, 100)}",
        "user_id": random.randint(1, 100),
        "rating": random.randint(1, 5),
        "comment": random.choice(COMMENTS),
    }


GENERATORS = [
    health_check, list_users, list_products, list_orders, list_inventory,
    list_categories, search_products, read_analytics, list_reviews,
    create_user, create_product, create_order, create_review,
]


@dataclass
class Stats:
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    total_latency: float = 0.0
    duration: float = 0.0

    def record(self, ok: bool, latency: float):
        self.total += 1
        self.total_latency += latency
        if ok:
            self.succeeded += 1
        else:
            self.failed += 1

    @property
    def average_latency(self) -> float:
        return self.total_latency / self.total if self.total else 0.0

    @property
    def requests_per_second(self) -> float:
        return self.total / self.duration if self.duration else 0.0

    def summary(self) -> str:
        def pct(n):
            return n / self.total * 100 if self.total else 0.0

        separator = "=" * 60
        return "\n".join([
            separator,
            "LOAD TEST RESULTS",
            separator,
            f"Total Requests:       {self.total}",
            f"Successful Requests:  {self.succeeded} ({pct(self.succeeded):.2f}%)",
            f"Failed Requests:      {self.failed} ({pct(self.failed):.2f}%)",
            f"Average Latency:      {self.average_latency * 1000:.1f}ms",
            f"Total Duration:       {self.duration:.2f}s",
            f"Requests/Second:      {self.requests_per_second:.2f}",
            separator,
        ])


async def send_random_request(client: httpx.AsyncClient, request_num: int, stats: Stats):
    method, path, body = random.choice(GENERATORS)()
    start = time.perf_counter()
    try:
        response = await client.request(method, path, json=body)
    except httpx.HTTPError as e:
        stats.record(False, time.perf_counter() - start)
        logger.warning("Request #%d: Failed (%s %s): %s", request_num, method, path, e)
        return

    latency = time.perf_counter() - start
    ok = 200 <= response.status_code < 300
    stats.record(ok, latency)
    if not ok:
        logger.warning("Request #%d: Failed (%s %s) - Status: %d, Latency: %.1fms",
                       request_num, method, path, response.status_code, latency * 1000)
    elif request_num % 100 == 0:
        logger.info("Request #%d: Success (%s %s) - Status: %d, Latency: %.1fms",
                    request_num, method, path, response.status_code, latency * 1000)


async def run_load_test(base_url: str, total: int, concurrency: int, delay: float,
                        timeout: float = 10.0, transport=None) -> Stats:
    stats = Stats()
    semaphore = asyncio.Semaphore(concurrency)

    async with httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport) as client:
        # Raises when the target is unreachable
        health = await client.get("/health")
        health.raise_for_status()
        logger.info("Server is healthy, starting load test...")

        async def worker(n):
            async with semaphore:
                await send_random_request(client, n, stats)

        start = time.perf_counter()
        tasks = []
        for n in range(total):
            tasks.append(asyncio.create_task(worker(n)))
            if delay:
                await asyncio.sleep(delay)
        await asyncio.gather(*tasks)
        stats.duration = time.perf_counter() - start

    return stats


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate synthetic traffic against the catalog gateway.")
    parser.add_argument("--base-url", default="http://localhost:8080")
    parser.add_argument("--requests", type=int, default=1000, help="total requests to send")
    parser.add_argument("--concurrency", type=int, default=50, help="requests in flight at once")
    parser.add_argument("--delay", type=float, default=0.05, help="seconds between request launches")
    parser.add_argument("--timeout", type=float, default=10.0, help="per-request timeout in seconds")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging("INFO")
    logger.info("Target: %s, requests: %d, concurrency: %d, delay: %.3fs",
                args.base_url, args.requests, args.concurrency, args.delay)
    try:
        stats = asyncio.run(run_load_test(args.base_url, args.requests, args.concurrency,
                                          args.delay, args.timeout))
    except httpx.HTTPError as e:
        logger.error("Server is not reachable: %s", e)
        return 1
    print("\n" + stats.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
