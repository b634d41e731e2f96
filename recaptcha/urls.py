from django.urls import path

from . import views

app_name = "recaptcha"

urlpatterns = [
    path("demo/", views.demo, name="demo"),
]
