from lecturer_portal.controllers.base import ListScreen
from lecturer_portal.repositories.updates import UpdateRepository


class UpdatesScreen(ListScreen):
    repository_class = UpdateRepository
    noun = "update"
    plural = "updates"
    add_verb = "posting"
    created_title = "Update posted successfully"
    updated_title = "Update edited successfully"
    deleted_title = "Update deleted successfully"
