import django_filters

from accounts.models import AccountUser


class AccountUserFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = AccountUser
        fields = ["name"]
