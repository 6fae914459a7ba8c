from typing import Optional

from PhysicalMemory import NUMBER_OF_PAGES, NUM_FRAMES


class PageTable:
	#	table[p] is the frame holding page p, or None while p is not resident
	#	owners[f] is the page currently mapped to frame f, or None; kept in step with table so the previous owner of a
	#	frame is found without scanning every page

	def __init__(self, num_entries: int = NUMBER_OF_PAGES, num_frames: int = NUM_FRAMES):
		self.table = [None] * num_entries
		self.owners = [None] * num_frames

	def lookup(self, page_number: int) -> Optional[int]:
		return self.table[page_number]

	def owner_of(self, frame_number: int) -> Optional[int]:
		return self.owners[frame_number]

	def map(self, page_number: int, frame_number: int) -> Optional[int]:
		"""maps 'page_number' to 'frame_number'; the page that owned the frame before (if any) is unmapped first and
		returned so the caller can log or invalidate it"""
		previous_page = self.owners[frame_number]
		if previous_page is not None:
			self.table[previous_page] = None

		old_frame = self.table[page_number]
		if old_frame is not None:
			self.owners[old_frame] = None

		self.table[page_number] = frame_number
		self.owners[frame_number] = page_number
		return previous_page if previous_page != page_number else None

	def unmap(self, page_number: int) -> Optional[int]:
		frame_number = self.table[page_number]
		if frame_number is not None:
			self.owners[frame_number] = None
			self.table[page_number] = None
		return frame_number

	def resident_pages(self) -> int:
		return sum(1 for frame_number in self.table if frame_number is not None)
