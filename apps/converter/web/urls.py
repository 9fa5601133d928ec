from django.urls import path
from django.views.generic import RedirectView

from apps.converter.web import views

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='converter-view', permanent=False)),
    path('view/', views.view_form, name='converter-view'),
    path('convert/', views.convert, name='converter-convert'),
]
