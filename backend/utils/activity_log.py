from models.activity import ActivityOrm




def _cadet_created(cadet):
    return {
        "type": "cadet_activity",
        "title": "New Cadet Added",
        "description": f"Cadet {cadet.first_name} {cadet.last_name} has been added to the system",
        "related_id": cadet.id,
        "related_type": "cadet",
        "campus": cadet.campus,
    }


def _application_submitted(application):
    return {
        "type": "system_event",
        "title": "New Application Received",
        "description": f"Application received from {application.first_name} {application.last_name}",
        "related_id": application.id,
        "related_type": "application",
        "campus": application.preferred_campus,
    }


def _application_reviewed(application):
    return {
        "type": "task_completed",
        "title": "Application Reviewed",
        "description": f"Application from {application.first_name} {application.last_name} marked {application.status}",
        "related_id": application.id,
        "related_type": "application",
        "campus": application.preferred_campus,
    }


ACTIVITY_BUILDERS = {
    "cadet_created": _cadet_created,
    "application_submitted": _application_submitted,
    "application_reviewed": _application_reviewed,
}


def build_activity(action: str, entity, performed_by: str | None = None) -> ActivityOrm:
    """Activity row for a write; the caller adds it to the same session as the write itself"""
    fields = ACTIVITY_BUILDERS[action](entity)
    return ActivityOrm(**fields, performed_by=performed_by)
