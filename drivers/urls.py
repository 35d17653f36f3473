# drivers/urls.py
from django.urls import path
from . import views

app_name = 'drivers'

urlpatterns = [
    path('', views.dashboard, name='dashboard'),
    path('drivers/add/', views.driver_add, name='driver_add'),
]
