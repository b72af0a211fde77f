from import_export import resources

from .models import Answer, Post, Room, User


# Column order is the header row of each exported table.


class PostResource(resources.ModelResource):
    class Meta:
        model = Post
        fields = ("post_id", "timestamp", "user_id", "room_id", "message_text", "has_poll")
        export_order = fields
        import_id_fields = ("post_id",)


class AnswerResource(resources.ModelResource):
    class Meta:
        model = Answer
        fields = ("answer_id", "timestamp", "poll_post_id", "user_id", "answer_value")
        export_order = fields
        import_id_fields = ("answer_id",)


class UserResource(resources.ModelResource):
    class Meta:
        model = User
        fields = ("user_id", "display_name")
        export_order = fields
        import_id_fields = ("user_id",)


class RoomResource(resources.ModelResource):
    class Meta:
        model = Room
        fields = ("room_id", "room_name")
        export_order = fields
        import_id_fields = ("room_id",)


TABLE_RESOURCES = {
    "posts": PostResource,
    "answers": AnswerResource,
    "users": UserResource,
    "rooms": RoomResource,
}
