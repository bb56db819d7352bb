from . import products, releases, platforms, cases, steps, preconditions, expectations, runs

routers = [
    products.router,
    releases.router,
    platforms.router,
    cases.router,
    steps.router,
    preconditions.router,
    expectations.router,
    runs.router
]
