from django.urls import path, include

urlpatterns = [
    path('session/', include('accounts.urls.auth')),
    path('users/', include('accounts.urls.users')),
    path('user/', include('accounts.urls.user_settings')),
]
