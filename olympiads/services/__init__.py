# olympiads/services
