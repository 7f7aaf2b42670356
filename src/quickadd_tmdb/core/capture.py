"""
Quick capture flow.

Prompts for a title, resolves it against TMDB and stores the template
variables on the host handle.
"""

from typing import Any, Dict, Mapping, Optional

from quickadd_tmdb.api.tmdb import TMDB, format_search_result
from quickadd_tmdb.config.settings import TMDB_API_KEY_OPTION, TYPE_OPTION
from quickadd_tmdb.core.host import QuickAdd, QuickAddApi
from quickadd_tmdb.core.variables import create_variables_by_type
from quickadd_tmdb.exceptions import MissingDataError, NoResultsError
from quickadd_tmdb.models.media import MediaType
from quickadd_tmdb.utils.logger import get_logger

logger = get_logger(__name__)

NAME_PROMPT = "Enter movie / tv series name"


def choose_search_result(response: Dict[str, Any], query: str, media_type: MediaType,
                         quick_add_api: QuickAddApi) -> Dict[str, Any]:
    """
    Let the user pick one search result.

    Raises:
        MissingDataError: If the response has no 'results' list
        NoResultsError: If the list is empty
    """
    if "results" not in response:
        raise MissingDataError("results", "search response")
    results = response["results"]
    if not results:
        raise NoResultsError(query, media_type)

    return quick_add_api.suggester(lambda item: format_search_result(item, media_type), results)


def run(quick_add: QuickAdd, settings: Mapping[str, Any], client: Optional[TMDB] = None) -> Dict[str, Any]:
    """
    Run one capture.

    Args:
        quick_add: Host handle; its ``variables`` slot receives the result
        settings: Plugin settings holding the API key and the media type
        client: TMDB client to use, built from ``settings`` when omitted

    Returns:
        The variable mapping, also assigned to ``quick_add.variables``
    """
    quick_add_api = quick_add.quick_add_api
    media_type = MediaType.parse(settings[TYPE_OPTION])
    owns_client = client is None
    if owns_client:
        client = TMDB(settings.get(TMDB_API_KEY_OPTION, ''))

    try:
        name = quick_add_api.input_prompt(NAME_PROMPT)
        logger.info(f"Searching TMDB {media_type.value} for '{name}'")

        response = client.search(name, media_type)
        choice = choose_search_result(response, name, media_type, quick_add_api)

        if "id" not in choice:
            raise MissingDataError("id", "search result")
        details = client.get_details(choice["id"], media_type)

        variables = create_variables_by_type(details, media_type, quick_add_api)
    finally:
        if owns_client:
            client.close()

    logger.info(f"Created variables for '{variables['title']}'")
    quick_add.variables = variables
    return variables
