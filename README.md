# redditwiki

A small client for the wiki endpoints of the Reddit API. It reads wiki pages
and their revisions, edits and reverts pages, manages page settings and
editors, and lists the posts that discuss a page.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Make a `Client` with the base URL of the API. You can pass a
`requests.Session` that already carries your authentication and a User-Agent
string; without them a new session and the agent `redditwiki` are used.
Then give the client to a `WikiService`:

```python
import requests

from redditwiki.client import Client
from redditwiki.wiki import WikiService

session = requests.Session()
session.headers["Authorization"] = "Bearer token"

client = Client("https://oauth.reddit.com/", session, "redditwiki-example/0.1")
wiki = WikiService(client)

page = wiki.page("mysubreddit", "index")
if page is not None:
    print(page.content, page.revision_by.name if page.revision_by else None)

print(wiki.pages("mysubreddit"))
```

`page_revision(subreddit, page, revision_id)` fetches a page as it was at a
given revision; an empty revision id gives the latest version, as `page` does.

### Editing

```python
from redditwiki.wiki import WikiPageEditRequest

wiki.edit(WikiPageEditRequest(
    subreddit="mysubreddit",
    page="index",
    content="# Welcome",
    reason="new heading",
))

wiki.revert("mysubreddit", "index", "some-revision-id")
```

The reason is optional and is only sent when it is not empty.

### Settings and editors

```python
from redditwiki.wiki import WikiPagePermissionLevel, WikiPageSettingsUpdateRequest

current = wiki.settings("mysubreddit", "index")

updated = wiki.update_settings(
    "mysubreddit",
    "index",
    WikiPageSettingsUpdateRequest(
        permission_level=WikiPagePermissionLevel.APPROVED_CONTRIBUTORS_ONLY,
        listed=False,
    ),
)

wiki.allow("mysubreddit", "index", "someuser")
wiki.deny("mysubreddit", "index", "someuser")
```

The permission level is always sent; `listed` is sent only when it is not
`None`. The permission levels are `SUBREDDIT_WIKI_PERMISSIONS`,
`APPROVED_CONTRIBUTORS_ONLY` and `MODERATORS_ONLY`.

### Revisions and discussions

```python
from redditwiki.models import ListOptions

for revision in wiki.revisions_page("mysubreddit", "index", ListOptions(limit=10)):
    print(revision.id, revision.reason, revision.created)

all_revisions = wiki.revisions("mysubreddit")

hidden = wiki.toggle_visibility("mysubreddit", "index", "some-revision-id")

for post in wiki.discussions("mysubreddit", "index"):
    print(post.title, post.permalink)
```

The IDs that you pass as `after` and `before` for revisions do not need the
`WikiRevision_` prefix; it is added when it is missing. The `ListOptions`
you pass are not changed.

Timestamps such as `WikiPage.revision_date`, `WikiPageRevision.created` and
`User.created` are timezone-aware UTC `datetime` objects.

## Errors

A response with an error status raises `redditwiki.client.ResponseError`,
which carries the HTTP `status` and the `message` (the `message` field of a
JSON error body, or else the response text). Passing `None` where an edit or
a settings update request is expected raises `ValueError`.

## What it does not do

The package covers the wiki endpoints only. It does not obtain or refresh
OAuth tokens: authentication is whatever the `requests.Session` you pass in
carries. It does not page through listings for you; use `ListOptions` with
`after` and `before` to fetch further pages. There is no command-line tool.