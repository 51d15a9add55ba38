from catalog_gateway.routes import (
    analytics, cart, categories, inventory, orders, products, reviews, users, wishlist,
)

ROUTERS = [
    users.router,
    products.router,
    orders.router,
    inventory.router,
    reviews.router,
    categories.router,
    cart.router,
    analytics.router,
    wishlist.router,
]
