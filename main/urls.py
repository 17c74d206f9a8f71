from django.urls import path
from .views import *

urlpatterns = [
    path('devices/', device_list, name='device_list'),
    path('devices/<path:page_query>', device_list, name='device_list_page'),

    # Devices of one owner, the owner id is a bound route parameter
    path('owners/<int:owner>/devices/', device_list, name='owner_devices'),
    path('owners/<int:owner>/devices/<path:page_query>', device_list, name='owner_devices_page'),
]
