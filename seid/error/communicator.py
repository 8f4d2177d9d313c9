from typing import Optional

from seid.util import Colors, Span


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        header: str,
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color: Optional[str] = Colors.RED,
    ) -> str:
        # Without source text or location there is nothing to point at
        if not program or span.start_ln < 1:
            return header + ("\n" + after if after else "")

        color, endc = (color, Colors.ENDC) if color else ("", "")
        lines = program.split("\n")
        # Do not show the empty line after a final newline as context
        if lines[-1] == "" and span.end_ln < len(lines):
            lines.pop()

        error_lines = lines[
            max(0, span.start_ln - n_before - 1) : span.end_ln + n_after
        ]
        final_error_lines = []
        start_line_no = max(1, span.start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        for i, line in enumerate(error_lines, start=start_line_no):
            # Determine the number of spaces between e.g. '8.' and the code.
            # See the * in the following example:
            #    *8. 1 + 2
            # -> *9. (3 * 4
            #    10. - 5
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            final_line = ""
            # If this line contains denotated spans:
            if span.start_ln <= i <= span.end_ln:
                # First line
                if i == span.start_ln:
                    # Do not color outside of span on first line
                    final_line += f"-> {padding}{i}. {line[:span.start_col]}"

                    # If we have more than 1 line, color the remaining line
                    if span.multiline:
                        final_line += f"{color}{line[span.start_col:]}{endc}"
                    # If there is one line, color up until the correct col
                    else:
                        final_line += f"{color}{line[span.start_col:span.end_col]}{endc}"
                        final_line += line[span.end_col :]

                # Color lines (if any) that are in between the first and last line
                elif i < span.end_ln:
                    final_line += f"-> {padding}{i}. {color}{line}{endc}"
                # The last line, of a multiline
                else:
                    final_line += f"-> {padding}{i}. {color}{line[:span.end_col]}{endc}"
                    final_line += line[span.end_col :]

            else:
                final_line += f"   {padding}{i}. {line}"
            final_error_lines.append(final_line)

        message = header + "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message
