from rest_framework import serializers

from agency_ops.users.api.permissions import role_names
from agency_ops.users.models import User


class UserSerializer(serializers.ModelSerializer[User]):
    full_name = serializers.CharField(source="display_name", read_only=True)
    roles = serializers.SerializerMethodField()
    id = serializers.IntegerField(read_only=True)

    # Usernames and e-mails are managed through the admin.
    username = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "first_name",
            "last_name",
            "full_name",
            "email",
            "roles",
        ]

    def get_roles(self, obj: User) -> list[str]:
        return role_names(obj)

    def update(self, instance, validated_data):
        forbidden = {k for k in ("username", "email") if k in self.initial_data}
        if forbidden:
            errors = {f: "This field is read-only." for f in forbidden}
            raise serializers.ValidationError(errors)
        instance.first_name = validated_data.get("first_name", instance.first_name)
        instance.last_name = validated_data.get("last_name", instance.last_name)
        instance.save()
        return instance
