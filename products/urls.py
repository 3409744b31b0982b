from django.urls import path

from products.api.views import ProductCreateView

app_name = "products"

urlpatterns = [
    path("create/", ProductCreateView.as_view(), name="product-create"),
]
