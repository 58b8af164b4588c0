# olympiads/api
# JSON routes, all mounted under /api.
