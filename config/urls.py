from django.urls import path, include

urlpatterns = [
    path('recaptcha/', include('recaptcha.urls')),
]
