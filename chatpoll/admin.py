import logging
from urllib.parse import urlencode
from django.contrib import admin
from django.db.models import Count, IntegerField, OuterRef, Subquery, Value
from django.db.models.functions import Coalesce
from django.urls import reverse
from django.utils.html import format_html

from .models import Answer, AnswerValue, Post, Room, User
from .resources import AnswerResource, PostResource, RoomResource, UserResource
from simple_history.admin import SimpleHistoryAdmin
from import_export.admin import ExportMixin, ImportExportModelAdmin

log = logging.getLogger(__name__)


class BaseAdmin(SimpleHistoryAdmin):
    # base admin class that logs all actions
    def render_change_form(self, request, context, add=False, change=False, form_url="", obj=None):
        if obj:
            log.info(f"Admin Site: User {request.user} viewed {self.model.__name__} {obj.pk}")
        return super().render_change_form(request, context, add, change, form_url, obj)

    def changelist_view(self, request, extra_context=None):
        log.info(f"Admin Site: User {request.user} viewed {self.model.__name__} list")
        return super().changelist_view(request, extra_context)


class ReadonlyAdmin(ExportMixin, BaseAdmin):
    # posts and answers are append-only records of what the platform sent us
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class EditableAdmin(BaseAdmin, ImportExportModelAdmin):
    pass


@admin.register(User)
class UserAdmin(EditableAdmin):
    resource_classes = [UserResource]
    list_display = ("user_id", "display_name", "created_at")
    search_fields = ("user_id", "display_name")
    readonly_fields = ("created_at",)


@admin.register(Room)
class RoomAdmin(EditableAdmin):
    resource_classes = [RoomResource]
    list_display = ("room_id", "room_name", "created_at")
    search_fields = ("room_id", "room_name")
    readonly_fields = ("created_at",)


def _answer_count(answer_value):
    answers = (
        Answer.objects.filter(poll_post_id=OuterRef("pk"), answer_value=answer_value)
        .order_by()
        .values("poll_post_id")
        .annotate(count=Count("answer_id"))
        .values("count")
    )
    return Coalesce(Subquery(answers, output_field=IntegerField()), Value(0))


@admin.register(Post)
class PostAdmin(ReadonlyAdmin):
    resource_classes = [PostResource]
    list_display = ("post_id", "timestamp", "user_id", "room_id", "message_text", "has_poll", "poll_tally", "results_link")
    search_fields = ("post_id", "user_id", "room_id", "message_text")
    list_filter = ("has_poll", "room_id")

    def get_queryset(self, request):
        # one query for every tally on the page
        return super().get_queryset(request).annotate(
            ok_count=_answer_count(AnswerValue.OK),
            ng_count=_answer_count(AnswerValue.NG),
        )

    @admin.display(description="OK / NG")
    def poll_tally(self, obj):
        if not obj.has_poll:
            return "-"
        return f"{obj.ok_count} / {obj.ng_count}"

    @admin.display(description="Results")
    def results_link(self, obj):
        if not obj.has_poll:
            return "-"
        url = f"{reverse('chatpoll:poll-results')}?{urlencode({'postId': obj.post_id})}"
        return format_html('<a href="{}">Link</a>', url)


@admin.register(Answer)
class AnswerAdmin(ReadonlyAdmin):
    resource_classes = [AnswerResource]
    list_display = ("answer_id", "timestamp", "poll_post_id", "user_id", "answer_value")
    search_fields = ("poll_post_id", "user_id")
    list_filter = ("answer_value",)
