from django.shortcuts import render

from .forms import ContactForm


def demo(request):
    return render(request, "recaptcha/demo.html", {"form": ContactForm(request=request)})
