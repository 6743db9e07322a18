# Status messages, as sent on the response status line.
HTTP_STATUS: dict[int, str] = {
	200: "OK",
	303: "See Other",
	403: "Forbidden",
	404: "Not Found",
	405: "Method Not Allowed",
	500: "Internal server error",
}

# EOF
