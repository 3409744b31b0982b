from prometheus_client import Counter, Histogram


# Submission Metrics
product_submissions_total = Counter("products_submissions_total", "Product creation submissions", ["outcome"])

# Catalog Metrics
catalog_step_failures_total = Counter(
    "products_catalog_step_failures_total", "Commerce platform call failures", ["step"]
)

# Performance Metrics
image_upload_duration = Histogram(
    "products_image_upload_seconds",
    "Product image upload time",
    buckets=[0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30, float("inf")],
)
